"""
Pytest configuration and fixtures.
Provides test app client and async DB session replacement.
"""

import os

# Settings are read at import time, so the test environment goes in first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import crm.models  # noqa: F401
from crm.main import app
from crm.db.base import Base
from crm.db.session import get_db


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """
    Create a test engine with all tables.
    Uses in-memory SQLite for fast tests.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    """Sessionmaker bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    """
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client whose requests use the test database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def create_person(test_client):
    """Factory creating a person through the API and returning its JSON."""
    async def _create(name: str = "Jane Doe", **fields) -> dict:
        response = await test_client.post("/api/people", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_client(test_client):
    """Factory creating a client through the API and returning its JSON."""
    async def _create(name: str = "Acme", **fields) -> dict:
        response = await test_client.post("/api/clients", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def create_job(test_client):
    """Factory creating a job through the API and returning its JSON."""
    async def _create(client_id: str, title: str = "Install", **fields) -> dict:
        response = await test_client.post(
            "/api/jobs",
            json={"title": title, "clientId": client_id, **fields},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _create
