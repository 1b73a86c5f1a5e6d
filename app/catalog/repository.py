"""Product repository for database operations.

Provides the query and persistence primitives used by the product service.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.catalog.models import Product, ProductImage


class ProductRepository:
    """Repository for Product database operations.

    Wraps a single session; commit and rollback stay with the caller.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.get_by_title_or_slug("mens_chill_crew_neck_tee")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product and its images.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(
        self,
        product_id: str,
        include_images: bool = True,
    ) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.
            include_images: Whether to eagerly load images.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)

        if include_images:
            query = query.options(selectinload(Product.images))

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_title_or_slug(self, term: str) -> Product | None:
        """Get the first product whose title or slug matches, ignoring case.

        Args:
            term: Title or slug to look for.

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .where(
                or_(
                    func.upper(Product.title) == term.upper(),
                    func.lower(Product.slug) == term.lower(),
                )
            )
            .options(selectinload(Product.images))
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_all(self, limit: int = 10, offset: int = 0) -> Sequence[Product]:
        """Find a page of products with their images.

        Args:
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of products.
        """
        query = (
            select(Product)
            .options(selectinload(Product.images))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def preload(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Load a product and apply changes to it without flushing.

        Args:
            product_id: Product ID.
            changes: Column values to set on the product.

        Returns:
            Updated in-session product, or None if it does not exist.
        """
        product = await self.get_by_id(product_id)
        if product is None:
            return None

        for field, value in changes.items():
            setattr(product, field, value)
        return product

    async def replace_images(self, product: Product, urls: list[str]) -> None:
        """Delete all images of a product and stage new ones.

        Args:
            product: Product loaded with its images.
            urls: New image URLs, in order.
        """
        # Orphaned images are deleted by the flush
        product.images.clear()
        await self.session.flush()

        product.images.extend(ProductImage(url=url) for url in urls)

    async def delete(self, product: Product) -> None:
        """Delete a product; its images are removed by cascade.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    async def delete_all(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        result = await self.session.execute(delete(Product))
        return result.rowcount
