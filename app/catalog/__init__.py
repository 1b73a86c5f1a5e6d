"""Product Catalog.

Provides product and image persistence, lookup by id, title or slug,
transactional updates and bulk deletion.
"""

from app.catalog.exceptions import (
    CatalogError,
    ProductConflictError,
    ProductCreationError,
    ProductNotFoundError,
)
from app.catalog.models import Product, ProductImage
from app.catalog.repository import ProductRepository
from app.catalog.schemas import PaginationParams, ProductCreate, ProductUpdate
from app.catalog.service import ProductService

__all__ = [
    # Models
    "Product",
    "ProductImage",
    # Schemas
    "PaginationParams",
    "ProductCreate",
    "ProductUpdate",
    # Errors
    "CatalogError",
    "ProductConflictError",
    "ProductCreationError",
    "ProductNotFoundError",
    # Repository
    "ProductRepository",
    # Service
    "ProductService",
]
