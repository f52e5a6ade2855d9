"""
Recordbook: Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every fixture that touches a database gets its own SQLite file under
       pytest's tmp_path, so tests never share state.

Fixture Hierarchy (all function-scoped):
    ├── make_settings: Settings pointing at a throwaway database
    ├── engine: Async engine with the records table created
    ├── record_store: RecordStore on top of `engine`
    ├── test_client: HTTPX AsyncClient against a fresh app (default behavior)
    └── strict_client: same, with get_one_missing_as_not_found enabled
"""

import os
import tempfile
from contextlib import asynccontextmanager

# Set before any recordbook import so the module-level app never points
# at the working directory's database.
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='recordbook_test_')}/import.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from recordbook.config import Settings
from recordbook.database import (
    build_engine,
    build_session_factory,
    create_schema,
    dispose_engine,
)
from recordbook.main import create_app
from recordbook.services.record_store import RecordStore


@pytest.fixture
def make_settings(tmp_path):
    """Factory for Settings bound to a database file inside tmp_path."""

    def _make(**overrides) -> Settings:
        values = {
            "database_url": f"sqlite+aiosqlite:///{tmp_path / 'records.db'}",
            "log_level": "WARNING",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest_asyncio.fixture
async def engine(make_settings):
    engine = build_engine(make_settings())
    await create_schema(engine)
    yield engine
    await dispose_engine(engine)


@pytest.fixture
def record_store(engine):
    return RecordStore(build_session_factory(engine))


@asynccontextmanager
async def _client_for(config: Settings):
    app = create_app(config)
    # ASGITransport does not run the lifespan; provision the table directly
    await create_schema(app.state.engine)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        await dispose_engine(app.state.engine)


@pytest_asyncio.fixture
async def test_client(make_settings):
    """
    HTTPX AsyncClient routed straight into a fresh app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/users")
            assert response.status_code == 200
    """
    async with _client_for(make_settings()) as client:
        yield client


@pytest_asyncio.fixture
async def strict_client(make_settings):
    """Client whose app answers 404 for a missing record on GET /users/{id}."""
    async with _client_for(make_settings(get_one_missing_as_not_found=True)) as client:
        yield client
