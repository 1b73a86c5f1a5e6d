"""Database configuration and session management.

Provides async SQLAlchemy engine and session factory.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.infrastructure.config import settings

# Base class for models
Base = declarative_base()


def create_engine(url: str, echo: bool = False, **options: Any) -> AsyncEngine:
    """Create an async engine for the given database URL.

    SQLite connections get foreign key enforcement switched on so that
    ``ON DELETE CASCADE`` behaves as it does on PostgreSQL.

    Args:
        url: SQLAlchemy database URL.
        echo: Whether to log emitted SQL.
        options: Extra keyword arguments for create_async_engine.

    Returns:
        Configured AsyncEngine.
    """
    if url.startswith("sqlite"):
        async_engine = create_async_engine(url, echo=echo, **options)
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return async_engine

    return create_async_engine(url, echo=echo, pool_pre_ping=True, **options)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine.

    Args:
        async_engine: Engine to bind sessions to.

    Returns:
        Session factory producing AsyncSession instances.
    """
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# Create async engine
engine = create_engine(settings.database_url, echo=settings.debug)

# Session factory
async_session_factory = create_session_factory(engine)


async def create_tables(async_engine: AsyncEngine | None = None) -> None:
    """Create database tables if they don't exist.

    Args:
        async_engine: Engine to use, defaults to the application engine.
    """
    # Register models on Base.metadata
    import app.catalog.models  # noqa: F401

    async with (async_engine or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

