"""
Panel response bodies shaped like the ones the Application API returns.
"""

from typing import Any

HOST = "https://panel.test"
API_KEY = "ptla_test_key"


def server_object(**overrides: Any) -> dict[str, Any]:
    """Build a server object the way the panel returns it."""
    attributes = {
        "id": 5,
        "external_id": None,
        "uuid": "1a7ce997-259b-452e-8b4e-cecc464142ca",
        "identifier": "1a7ce997",
        "name": "Survival",
        "description": "",
        "suspended": False,
        "limits": {"memory": 1024, "swap": 0, "disk": 5120, "io": 500, "cpu": 100},
        "feature_limits": {"databases": 2, "allocations": 1},
        "user": 1,
        "node": 1,
        "allocation": 12,
        "nest": 1,
        "egg": 3,
        "pack": None,
        "container": {
            "startup_command": "java -jar server.jar",
            "image": "quay.io/pterodactyl/core:java",
            "installed": True,
            "environment": {"SERVER_JARFILE": "server.jar"},
        },
        "updated_at": "2024-01-01T00:00:00+00:00",
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    attributes.update(overrides)
    return {"object": "server", "attributes": attributes}


def database_object(**overrides: Any) -> dict[str, Any]:
    attributes = {
        "id": 1,
        "server": 5,
        "host": 4,
        "database": "s5_survival",
        "username": "u5_abcdef",
        "remote": "%",
        "max_connections": 0,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    attributes.update(overrides)
    return {"object": "server_database", "attributes": attributes}


def user_object(**overrides: Any) -> dict[str, Any]:
    attributes = {
        "id": 1,
        "external_id": None,
        "uuid": "c4022c6c-9bf1-4a23-bff9-519cceb38335",
        "username": "codeco",
        "email": "codeco@file.properties",
        "first_name": "Rihan",
        "last_name": "Arfan",
        "language": "en",
        "root_admin": True,
        "2fa": False,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    attributes.update(overrides)
    return {"object": "user", "attributes": attributes}


def list_object(items: list[dict[str, Any]], page: int = 1, total_pages: int = 1) -> dict[str, Any]:
    return {
        "object": "list",
        "data": items,
        "meta": {
            "pagination": {
                "total": len(items),
                "count": len(items),
                "per_page": 50,
                "current_page": page,
                "total_pages": total_pages,
                "links": {},
            }
        },
    }


