"""Shared fixtures for API tests."""

import asyncio
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import NullPool

from app.api.products import get_product_service
from app.catalog.service import ProductService
from app.infrastructure.database import create_engine, create_session_factory, create_tables
from app.main import app


@pytest.fixture
def api_engine(tmp_path: Path) -> Generator[AsyncEngine, None, None]:
    """Create a SQLite engine with the catalog schema."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}", poolclass=NullPool)
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def client(api_engine: AsyncEngine) -> Generator[TestClient, None, None]:
    """Create test client with the product service bound to the test database."""
    service = ProductService(create_session_factory(api_engine))
    app.dependency_overrides[get_product_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def product_payload() -> dict:
    """Get a valid product creation payload."""
    return {
        "title": "Chill Tee",
        "price": 30,
        "description": "Soft cotton tee",
        "stock": 4,
        "sizes": ["S", "M"],
        "gender": "unisex",
        "tags": ["shirt"],
        "images": ["a.jpg", "b.jpg"],
    }
