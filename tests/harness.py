"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests run against a throwaway SQLite database, so no external
services are needed.
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from microblog.persistence.tables import metadata
from microblog.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create(...)
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_sqlite_env_fixture():
    """Factory for fixtures backed by the SQL repositories on SQLite.

    Points DATABASE__URL at a file in the test's tmp_path, builds a container
    with real persistence and creates the schema from the table metadata.
    Yields the APP-scoped container so tests can open as many request scopes
    (one database transaction each) as they need.

    Returns:
        Pytest fixture function that yields AsyncContainer
    """

    @pytest_asyncio.fixture
    async def _sqlite_environment(tmp_path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(
            "DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'microblog.db'}"
        )
        container = build_test_container(unmock={"persistence"})

        engine = await container.get(AsyncEngine)
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

        yield container

        await container.close()

    return _sqlite_environment
