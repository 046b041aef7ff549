"""Test harness for unit and integration tests.

Unit tests run against in-memory repositories. Integration tests unmock
persistence and expect a PostgreSQL database at DATABASE__URL with the
schema created by scripts/create_schema.py.
"""

import pytest_asyncio

from agora.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container per test, so in-memory data never
    leaks between tests, and yields a request-scoped container for service
    access.

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
