"""
Booking API - Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every API test gets a fresh app built by create_app() against its own
       SQLite file (aiosqlite), with the schema created from the ORM models.

Fixture Hierarchy (all function-scoped):
    ├── test_settings:   Settings pointing at a temp SQLite file
    ├── test_app:        create_app(test_settings) with tables created
    ├── test_client:     HTTPX AsyncClient over ASGITransport
    ├── db_session:      a session on the same database, for assertions
    └── mock_db_session: AsyncMock session for service unit tests
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Before any bookingapi import: the module-level app must not point at a real DB
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_import.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bookingapi.config import Settings
from bookingapi.main import create_app
import bookingapi.models  # noqa: F401  (registers tables)


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'booking_test.db'}",
        log_level="WARNING",
        password_hash_method="pbkdf2:sha256:1000",
        max_body_size=64 * 1024,
        cors_origins="http://localhost:3000",
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    app = create_app(test_settings)
    await app.state.db.create_all()
    yield app
    await app.state.db.dispose()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient wired straight into the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def db_session(test_app):
    """Direct session on the test database for inspecting stored rows."""
    async with test_app.state.db.session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_book(mock_db_session):
            mock_db_session.get.return_value = slot
            await slot_service.book_slot(mock_db_session, str(slot.id))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def slot_payload():
    return {
        "date": "2024-01-01",
        "starttime": "09:00",
        "endtime": "10:00",
        "mode": "online",
    }


@pytest.fixture
def intake_payload():
    return {
        "name": "Asha Rao",
        "phone": "+91 98765 43210",
        "date": "2024-01-01",
        "time": "09:00",
        "mode": "online",
        "email": "asha@example.com",
    }
