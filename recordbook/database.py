"""
Recordbook: Database Engine & Session Management
===================================================

What:  Async SQLAlchemy engine construction, session factory, declarative base
       and the startup/shutdown helpers around them.
How:   The app factory calls build_engine() and build_session_factory() once
       and hands the session factory to the RecordStore. Nothing here is
       module-level state: every engine belongs to the app that built it.
Who:   Used by main.create_app() and by test fixtures.

Schema provisioning:
    create_schema() issues CREATE TABLE IF NOT EXISTS for every model
    registered on Base. It runs once in the app lifespan. There are no
    migrations; an existing table is left as it is.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from recordbook.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def build_engine(config: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database URL.

    Connection pooling is left to SQLAlchemy's defaults for the dialect
    (aiosqlite gets an async-adapted queue pool for file databases).
    SQL echo follows the DEBUG log level.
    """
    return create_async_engine(
        config.database_url,
        pool_pre_ping=config.db_pool_pre_ping,
        echo=config.log_level == "DEBUG",
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: returned rows stay readable after the transaction ends
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables. Safe to call on every startup."""
    # Model modules register themselves on Base.metadata when imported
    from recordbook.models import record  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler) and by tests.
    """
    await engine.dispose()
