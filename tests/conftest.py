"""Common test fixtures.

The API runs against an in-memory SQLite database shared through a
StaticPool, so every test gets a fresh, empty destinations table.
"""
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from dreamvacation.config import Settings
from dreamvacation.main import create_app
from dreamvacation.utils.database import Database, get_db
from planner.api_client import DestinationsClient

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(DATABASE_URL=TEST_DATABASE_URL)


@pytest.fixture
def database():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return Database(engine)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    """TestClient with lifespan, so the schema is created on startup"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_session():
    """A session whose every statement fails like a lost connection"""
    session = AsyncMock(spec=AsyncSession)
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    session.execute.side_effect = error
    session.scalars.side_effect = error
    return session


@pytest.fixture
def failing_client(app, broken_session):
    async def override_get_db():
        yield broken_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(app, database):
    """Planner HTTP client wired straight into the ASGI app"""
    await database.init_schema()
    transport = httpx.ASGITransport(app=app)
    async with DestinationsClient("http://testserver", transport=transport) as destinations_client:
        yield destinations_client
    await database.close()
