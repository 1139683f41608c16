"""
Shared pytest fixtures for the ptero_admin test suite.

HTTP traffic is mocked with respx; every test gets a router bound to the
fake panel host so routes can be declared by path alone.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import respx

from ptero_admin import PteroAdmin
from ptero_admin.config import AdminConfig
from ptero_admin.request import AdminRequester
from tests.payloads import API_KEY, HOST


@pytest.fixture
def config() -> AdminConfig:
    return AdminConfig(host=HOST, api_key=API_KEY, timeout=5.0)


@pytest.fixture
def panel() -> Generator[respx.MockRouter, None, None]:
    """A respx router for the fake panel. Unmatched requests fail the test."""
    with respx.mock(base_url=HOST, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def requester(config: AdminConfig) -> AsyncGenerator[AdminRequester, None]:
    requester = AdminRequester(config)
    yield requester
    await requester.close()


@pytest.fixture
async def admin() -> AsyncGenerator[PteroAdmin, None]:
    async with PteroAdmin(HOST, API_KEY, timeout=5.0) as admin:
        yield admin
