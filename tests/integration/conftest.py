"""Integration test fixtures.

Provides fixtures for integration testing with a real database and the
FastAPI app. Uses one shared SQLite in-memory connection per test so every
unit of work sees the same data.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_auth.infrastructure.persistence.database import create_session_factory, create_tables
from blog_auth.main import app
from blog_auth.presentation.dependencies import get_session_factory

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine using SQLite in-memory."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory configured like production."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def client(test_session_factory) -> AsyncGenerator[AsyncClient]:
    """
    Create an HTTP client for the real application with the test database.

    The client keeps cookies, so the signed session carries across requests
    the way it would in a browser. Redirects are not followed.
    """
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
