"""Shared fixtures for catalog tests.

Each test gets its own SQLite database file with the schema created
from the ORM models.
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from app.catalog.schemas import ProductCreate
from app.catalog.service import ProductService
from app.infrastructure.database import create_engine, create_session_factory, create_tables


def sqlite_url(tmp_path: Path) -> str:
    """Build an aiosqlite URL for a database file under tmp_path."""
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a SQLite engine with the catalog schema."""
    test_engine = create_engine(sqlite_url(tmp_path), poolclass=NullPool)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory for the test database."""
    return create_session_factory(engine)


@pytest.fixture
def service(session_factory: async_sessionmaker[AsyncSession]) -> ProductService:
    """Create a product service bound to the test database."""
    return ProductService(session_factory)


def _make_product(title: str, **overrides: Any) -> ProductCreate:
    payload: dict[str, Any] = {
        "title": title,
        "price": 25.0,
        "description": f"{title} description",
        "stock": 5,
        "sizes": ["S", "M", "L"],
        "gender": "unisex",
        "tags": ["shirt"],
        "images": [],
    }
    payload.update(overrides)
    return ProductCreate(**payload)


@pytest.fixture
def make_product() -> Callable[..., ProductCreate]:
    """Get a factory for product payloads with sensible defaults."""
    return _make_product
