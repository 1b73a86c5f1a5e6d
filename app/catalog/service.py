"""Product service for catalog operations.

High-level service that combines repository operations with
transaction handling and error translation for the product catalog.
"""

from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.catalog.exceptions import (
    ProductConflictError,
    ProductCreationError,
    ProductNotFoundError,
)
from app.catalog.models import Product, ProductImage
from app.catalog.repository import ProductRepository
from app.catalog.schemas import PaginationParams, ProductCreate, ProductUpdate


def is_uuid(value: str) -> bool:
    """Check whether a string is a UUID in canonical 8-4-4-4-12 form.

    Args:
        value: String to check.

    Returns:
        True if the string is a canonical UUID.
    """
    try:
        return str(UUID(value)) == value.lower()
    except ValueError:
        return False


class ProductService:
    """Service for product CRUD operations.

    Every operation runs in its own session. ``update`` runs its writes
    in a single transaction that is rolled back on failure.

    Example usage:
        service = ProductService(async_session_factory)

        created = await service.create(
            ProductCreate(title="Chill Tee", sizes=["M"], gender="men"),
        )
        product = await service.find_one_plain(created["slug"])
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        logger: Any = None,
    ) -> None:
        """Initialize service with its store handle.

        Args:
            session_factory: Factory for database sessions.
            logger: structlog logger, defaults to one bound to this service.
        """
        self.session_factory = session_factory
        self.logger = logger or structlog.get_logger().bind(service="ProductService")

    async def create(self, details: ProductCreate) -> dict[str, Any]:
        """Create a product together with its images.

        Args:
            details: Product payload, including image URLs.

        Returns:
            Created product with ``images`` as the given URL list.

        Raises:
            ProductCreationError: If the product could not be persisted.
        """
        images = list(details.images)

        async with self.session_factory() as session:
            try:
                product = Product(
                    **details.product_fields(),
                    images=[ProductImage(url=url) for url in images],
                )
                await ProductRepository(session).save(product)
                await session.commit()
            except Exception as e:
                await session.rollback()
                self.logger.exception("Product creation failed", title=details.title, error=str(e))
                raise ProductCreationError("Error creating product") from e

        self.logger.info("Product created", product_id=product.id, image_count=len(images))
        return {**product.to_dict(include_images=False), "images": images}

    async def find_all(self, pagination: PaginationParams | None = None) -> list[dict[str, Any]]:
        """List a page of products.

        Args:
            pagination: Limit and offset, defaults to the first page.

        Returns:
            Products with images flattened to URLs.
        """
        pagination = pagination or PaginationParams()

        async with self.session_factory() as session:
            try:
                products = await ProductRepository(session).find_all(
                    limit=pagination.limit,
                    offset=pagination.offset,
                )
            except Exception as e:
                self.logger.exception("Product listing failed", error=str(e))
                raise

            return [product.to_dict() for product in products]

    async def find_one(self, term: str) -> Product:
        """Find a product by id, title or slug.

        A canonical UUID is looked up by id; any other term matches a title
        or slug, ignoring case. Images are loaded on both paths.

        Args:
            term: Product id, title or slug.

        Returns:
            Matching product with its images.

        Raises:
            ProductNotFoundError: If nothing matches.
        """
        async with self.session_factory() as session:
            return await self._find_one(ProductRepository(session), term)

    async def find_one_plain(self, term: str) -> dict[str, Any]:
        """Find a product and flatten its images to URLs.

        Args:
            term: Product id, title or slug.

        Returns:
            Product as a dictionary.
        """
        product = await self.find_one(term)
        return product.to_dict()

    async def update(self, product_id: str, details: ProductUpdate) -> dict[str, Any]:
        """Update product fields and optionally replace all images.

        Args:
            product_id: Product ID.
            details: Fields to change. ``images`` replaces the whole image
                set when provided, including as an empty list.

        Returns:
            Fresh read of the updated product.

        Raises:
            ProductNotFoundError: If the product does not exist.
            ProductConflictError: If the store rejects the update.
        """
        product_id = product_id.lower()

        async with self.session_factory() as session:
            repository = ProductRepository(session)

            product = await repository.preload(product_id, details.changes())
            if product is None:
                raise ProductNotFoundError(
                    f"Product with id {product_id} not found",
                    term=product_id,
                )

            try:
                if details.images is not None:
                    await repository.replace_images(product, details.images)

                await repository.save(product)
                await session.commit()
            except Exception as e:
                self.logger.exception("Product update failed", product_id=product_id, error=str(e))
                await session.rollback()
                raise ProductConflictError("Duplicate key", details={"product_id": product_id}) from e

        self.logger.info(
            "Product updated",
            product_id=product_id,
            images_replaced=details.images is not None,
        )
        return await self.find_one_plain(product_id)

    async def remove(self, term: str) -> None:
        """Delete a product and its images.

        Args:
            term: Product id, title or slug.

        Raises:
            ProductNotFoundError: If nothing matches.
        """
        async with self.session_factory() as session:
            try:
                repository = ProductRepository(session)
                product = await self._find_one(repository, term)
                await repository.delete(product)
                await session.commit()
            except Exception as e:
                self.logger.error("Product removal failed", term=term, error=str(e))
                raise

        self.logger.info("Product removed", product_id=product.id)

    async def delete_all_products(self) -> int:
        """Delete every product in the catalog.

        Returns:
            Number of deleted products.
        """
        async with self.session_factory() as session:
            try:
                deleted = await ProductRepository(session).delete_all()
                await session.commit()
            except Exception as e:
                self.logger.exception("Bulk product deletion failed", error=str(e))
                raise

        self.logger.info("All products deleted", deleted=deleted)
        return deleted

    async def _find_one(self, repository: ProductRepository, term: str) -> Product:
        try:
            if is_uuid(term):
                product = await repository.get_by_id(term.lower())
            else:
                product = await repository.get_by_title_or_slug(term)

            if product is None:
                raise ProductNotFoundError(term=term)

            return product
        except Exception as e:
            self.logger.error("Product lookup failed", term=term, error=str(e))
            raise
