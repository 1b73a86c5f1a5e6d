"""SQLAlchemy models for product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.database import Base

GENDERS = ("men", "women", "kid", "unisex")


def normalize_slug(value: str) -> str:
    """Normalize a slug: lowercase, spaces to underscores, no apostrophes.

    Args:
        value: Raw slug or title.

    Returns:
        Normalized slug.
    """
    return value.lower().replace(" ", "_").replace("'", "")


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID string).
        title: Product title (unique).
        price: Unit price.
        description: Product description.
        slug: URL-safe identifier (unique).
        stock: Available quantity.
        sizes: Available sizes.
        gender: Target gender (men, women, kid, unisex).
        tags: Free-form tags.
        images: Images owned by this product.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProductImage.id",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, slug={self.slug})>"

    def to_dict(self, include_images: bool = True) -> dict[str, Any]:
        """Convert to dictionary.

        Images are flattened to their URLs.

        Args:
            include_images: Whether to include the images key.

        Returns:
            Plain dictionary representation.
        """
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "slug": self.slug,
            "stock": self.stock,
            "sizes": list(self.sizes or []),
            "gender": self.gender,
            "tags": list(self.tags or []),
        }
        if include_images:
            data["images"] = [image.url for image in self.images]
        return data


class ProductImage(Base):
    """Image URL owned by a single product."""

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    product_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        return f"<ProductImage(id={self.id}, url={self.url})>"


@event.listens_for(Product, "before_insert")
def _slug_before_insert(mapper: Any, connection: Any, target: Product) -> None:
    if not target.slug:
        target.slug = target.title
    target.slug = normalize_slug(target.slug)


@event.listens_for(Product, "before_update")
def _slug_before_update(mapper: Any, connection: Any, target: Product) -> None:
    if target.slug:
        target.slug = normalize_slug(target.slug)
