"""
Pet Store Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── session_factory: async_sessionmaker bound to a fresh SQLite file
    ├── test_client: HTTPX AsyncClient whose session dependencies use session_factory
    └── sample_*_data: request payloads
"""

import os
import tempfile

# Settings are read at import time; point them at a throwaway database
# before any pet_store module is imported.
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='pet_store_test_')}/app.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from pet_store.database import Base, get_db_session, get_read_only_db_session
import pet_store.models  # noqa: F401  (registers tables on Base.metadata)


# ══════════════════════════════════════════════════════════════════════════
# Mocked Session (unit tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            with patch("pet_store.services.pet_store_service.pet_store_repository") as repo:
                repo.find_by_id = AsyncMock(return_value=None)
                ...
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Real Database (integration tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """
    A session factory bound to a fresh SQLite database with all tables created.

    One database file per test, so tests never see each other's rows.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'pet_store.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    Both session dependencies are overridden to use `session_factory` with the
    same commit / rollback behaviour as the real ones.
    """
    from pet_store.main import app

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def override_read_only_db_session():
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.rollback()

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_read_only_db_session] = override_read_only_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Sample Payloads
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_pet_store_data():
    return {
        "pet_store_name": "Paws & Claws",
        "pet_store_address": "12 Main St",
        "pet_store_city": "Springfield",
        "pet_store_state": "IL",
        "pet_store_zip": "62701",
        "pet_store_phone": "217-555-0100",
    }


@pytest.fixture
def sample_employee_data():
    return {
        "employee_first_name": "A",
        "employee_last_name": "B",
        "employee_phone": "555",
        "employee_job_title": "Clerk",
    }


@pytest.fixture
def sample_customer_data():
    return {
        "customer_first_name": "Dana",
        "customer_last_name": "Smith",
        "customer_email": "dana@example.com",
    }
