"""Input schemas for catalog operations.

Pydantic models validating product payloads and pagination parameters.
"""

from typing import Literal

from pydantic import BaseModel, Field

from app.infrastructure.config import settings

Gender = Literal["men", "women", "kid", "unisex"]

# Fields that an update may merge onto an existing product
MERGEABLE_FIELDS = (
    "title",
    "price",
    "description",
    "slug",
    "stock",
    "sizes",
    "gender",
    "tags",
)


class ProductCreate(BaseModel):
    """Payload for creating a product."""

    title: str = Field(..., min_length=1, description="Product title")
    price: float = Field(default=0, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    slug: str | None = Field(
        default=None,
        description="URL-safe identifier, derived from the title when omitted",
    )
    stock: int = Field(default=0, ge=0, description="Available quantity")
    sizes: list[str] = Field(..., description="Available sizes")
    gender: Gender = Field(..., description="Target gender")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")

    def product_fields(self) -> dict:
        """Get product column values, without images."""
        return self.model_dump(exclude={"images"})


class ProductUpdate(BaseModel):
    """Partial payload for updating a product.

    Only fields explicitly set are applied. ``images`` left unset (or null)
    keeps the existing images; an empty list removes them all.
    """

    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = None

    def changes(self) -> dict:
        """Get the explicitly set product fields, without images."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if key in MERGEABLE_FIELDS
        }


class PaginationParams(BaseModel):
    """Pagination parameters."""

    limit: int = Field(default=settings.default_page_limit, ge=1, description="Maximum results")
    offset: int = Field(default=0, ge=0, description="Number of results to skip")
