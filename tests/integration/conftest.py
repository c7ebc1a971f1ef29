"""Integration test fixtures.

Provides fixtures for integration testing with a real database and FastAPI client.
Uses a throwaway SQLite file per test, reached through aiosqlite.
"""

import os

# Must be set before the app module reads its settings
os.environ["ENVIRONMENT"] = "test"

from collections.abc import AsyncGenerator, Generator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from user_identity.infrastructure.config.settings import get_settings  # noqa: E402

get_settings.cache_clear()

from user_identity.infrastructure.persistence.database import (  # noqa: E402
    create_session_factory,
    create_tables,
    drop_tables,
)
from user_identity.infrastructure.repositories import UserRepository  # noqa: E402
from user_identity.main import app  # noqa: E402
from user_identity.presentation.dependencies import get_session_factory  # noqa: E402


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'users.db'}"


def _create_engine(database_url: str) -> AsyncEngine:
    # NullPool: every session opens a fresh connection on the running loop
    return create_async_engine(database_url, poolclass=NullPool)


@pytest_asyncio.fixture
async def test_engine(database_url) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = _create_engine(database_url)
    await create_tables(engine)

    yield engine

    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def user_repository(test_engine) -> UserRepository:
    return UserRepository(create_session_factory(test_engine))


@pytest.fixture
def client(database_url) -> Generator[TestClient]:
    """
    Create a FastAPI test client with test database.

    This client uses the real application but with a throwaway database.
    The schema is created inside the client's event loop.
    """
    engine = _create_engine(database_url)
    session_factory = create_session_factory(engine)

    # Override the session factory dependency
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    with TestClient(app) as test_client:
        test_client.portal.call(create_tables, engine)
        yield test_client
        test_client.portal.call(engine.dispose)

    # Clean up overrides
    app.dependency_overrides.clear()
