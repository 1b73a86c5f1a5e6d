"""API schemas.

Pydantic models for response serialization.
"""

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductResponse(BaseModel):
    """Product with its image URLs."""

    id: str = Field(..., description="Product ID")
    title: str = Field(..., description="Product title")
    price: float = Field(..., description="Unit price")
    description: str | None = Field(default=None, description="Product description")
    slug: str = Field(..., description="URL-safe identifier")
    stock: int = Field(..., description="Available quantity")
    sizes: list[str] = Field(default_factory=list, description="Available sizes")
    gender: str = Field(..., description="Target gender")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")
