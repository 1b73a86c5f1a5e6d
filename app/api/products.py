"""Product API endpoints.

Provides CRUD endpoints over the product catalog.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.schemas import ErrorResponse, ProductResponse
from app.catalog.exceptions import (
    ProductConflictError,
    ProductCreationError,
    ProductNotFoundError,
)
from app.catalog.schemas import PaginationParams, ProductCreate, ProductUpdate
from app.catalog.service import ProductService
from app.infrastructure.config import settings
from app.infrastructure.database import async_session_factory

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_product_service() -> ProductService:
    """Get product service bound to the application database."""
    return ProductService(async_session_factory)


ServiceDep = Annotated[ProductService, Depends(get_product_service)]


def _not_found(error: ProductNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error_code": "PRODUCT_NOT_FOUND", "message": error.message},
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    request: ProductCreate,
    service: ServiceDep,
) -> ProductResponse:
    """Create a product with its images.

    Args:
        request: Product payload.
        service: Product service.

    Returns:
        Created product.

    Raises:
        HTTPException: If the product could not be stored.
    """
    try:
        product = await service.create(request)
    except ProductCreationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error_code": "PRODUCT_CREATE_FAILED", "message": e.message},
        )

    return ProductResponse(**product)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    service: ServiceDep,
    limit: int = Query(default=settings.default_page_limit, ge=1, description="Maximum results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
) -> list[ProductResponse]:
    """List a page of products."""
    products = await service.find_all(PaginationParams(limit=limit, offset=offset))
    return [ProductResponse(**product) for product in products]


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Get a product by id, title or slug.",
)
async def get_product(term: str, service: ServiceDep) -> ProductResponse:
    """Get a product by id, title or slug."""
    try:
        product = await service.find_one_plain(term)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return ProductResponse(**product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: UUID,
    request: ProductUpdate,
    service: ServiceDep,
) -> ProductResponse:
    """Update a product and optionally replace its images.

    Args:
        product_id: Product identifier.
        request: Fields to change.
        service: Product service.

    Returns:
        Updated product.

    Raises:
        HTTPException: If the product is missing or the update conflicts.
    """
    try:
        product = await service.update(str(product_id), request)
    except ProductNotFoundError as e:
        raise _not_found(e)
    except ProductConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error_code": "PRODUCT_CONFLICT", "message": e.message},
        )

    return ProductResponse(**product)


@router.delete(
    "/{term}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(term: str, service: ServiceDep) -> Response:
    """Delete a product and its images."""
    try:
        await service.remove(term)
    except ProductNotFoundError as e:
        raise _not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
