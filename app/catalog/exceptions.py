"""Catalog exceptions.

Errors raised by the product service for expected domain conditions.
The API layer maps each of them to a stable HTTP status.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProductNotFoundError(CatalogError):
    """Raised when a product cannot be found by id, slug or title."""

    def __init__(self, message: str = "Product not found", term: str | None = None) -> None:
        """Initialize product not found error.

        Args:
            message: Human-readable error message.
            term: Lookup term or id that matched nothing.
        """
        super().__init__(message, details={"term": term} if term is not None else None)


class ProductConflictError(CatalogError):
    """Raised when a store constraint rejects a product update."""

    pass


class ProductCreationError(CatalogError):
    """Raised when a product could not be persisted."""

    pass
