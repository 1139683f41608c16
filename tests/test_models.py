"""
Tests for the response models.
"""

from ptero_admin.models import Database, Pagination, Server, ServerList, User, UserList
from tests.payloads import database_object, list_object, server_object, user_object


class TestServer:
    def test_envelope_and_bare_attributes_are_equivalent(self):
        wrapped = Server(server_object())
        bare = Server(server_object()["attributes"])

        assert wrapped.raw == bare.raw
        assert wrapped.uuid == bare.uuid

    def test_nested_objects(self):
        server = Server(server_object())

        assert server.limits.disk == 5120
        assert server.feature_limits.databases == 2
        assert server.container.installed is True
        assert server.container.image == "quay.io/pterodactyl/core:java"

    def test_suspended_from_status_field(self):
        server = Server(server_object(suspended=None, status="suspended"))

        assert server.suspended is True

    def test_missing_sections_do_not_raise(self):
        server = Server({"object": "server", "attributes": {"id": 1, "name": "Bare"}})

        assert server.limits.memory is None
        assert server.container.environment == {}
        assert repr(server) == "<Server id=1 name='Bare'>"


class TestDatabase:
    def test_password_relationship(self):
        data = database_object(
            relationships={"password": {"object": "database_password", "attributes": {"password": "s3cret"}}}
        )

        assert Database(data).password == "s3cret"


class TestUser:
    def test_two_factor_flag(self):
        assert User(user_object(**{"2fa": True})).two_factor is True


class TestPagination:
    def test_defaults_for_missing_meta(self):
        pagination = Pagination(None)

        assert pagination.current_page == 1
        assert pagination.total_pages == 1
        assert pagination.has_next is False

    def test_server_list_iterates_servers(self):
        servers = ServerList(list_object([server_object(id=1), server_object(id=2)], total_pages=2))

        assert [s.id for s in servers] == [1, 2]
        assert servers.pagination.has_next is True


class TestNullSections:
    def test_null_meta_and_data(self):
        servers = ServerList({"object": "list", "data": None, "meta": None})

        assert len(servers) == 0
        assert servers.pagination.total_pages == 1

    def test_null_relationships(self):
        assert Database(database_object(relationships=None)).password is None

    def test_user_list_with_null_meta(self):
        users = UserList({"object": "list", "data": [user_object()], "meta": None})

        assert [u.username for u in users] == ["codeco"]
        assert users.pagination.has_next is False
