"""Catalog seeding.

Replaces the whole catalog with a small, fixed set of products.
Used for local development and demos.
"""

from typing import Any

import structlog

from app.catalog.schemas import ProductCreate
from app.catalog.service import ProductService

logger = structlog.get_logger()


SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Men's Chill Crew Neck Sweatshirt",
        "description": "Relaxed fit crew neck sweatshirt in heavyweight cotton.",
        "price": 75,
        "stock": 7,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["sweatshirt"],
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": "Lightweight quilted jacket with snap front closure.",
        "price": 200,
        "stock": 5,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "gender": "men",
        "tags": ["jacket"],
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
    },
    {
        "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
        "description": "Water-resistant bomber with ribbed cuffs and hem.",
        "price": 130,
        "stock": 10,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["shirt"],
        "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
    },
    {
        "title": "Women's Cropped Puffer Jacket",
        "description": "Cropped puffer with recycled insulation.",
        "price": 225,
        "stock": 85,
        "sizes": ["XS", "S", "M"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
    },
    {
        "title": "Kids Cybertruck Graffiti Long Sleeve Tee",
        "description": "Long sleeve cotton tee with graffiti print.",
        "price": 30,
        "stock": 10,
        "sizes": ["XS", "S", "M"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["1742694-00-A_1_2000.jpg", "1742694-00-A_3.jpg"],
    },
    {
        "title": "Scribble T Logo Onesie",
        "description": "Soft onesie with snap closure.",
        "price": 30,
        "stock": 16,
        "sizes": ["XS", "S"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["8529387-00-A_0_2000.jpg", "8529387-00-A_1.jpg"],
    },
]


async def seed_catalog(
    service: ProductService,
    products: list[dict[str, Any]] | None = None,
) -> dict[str, int]:
    """Delete every product and insert the seed catalog.

    Args:
        service: Product service to seed through.
        products: Product payloads, defaults to SEED_PRODUCTS.

    Returns:
        Seeding result with counts.
    """
    payloads = SEED_PRODUCTS if products is None else products

    deleted = await service.delete_all_products()

    for payload in payloads:
        await service.create(ProductCreate(**payload))

    logger.info("Catalog seeded", deleted=deleted, created=len(payloads))
    return {"deleted": deleted, "products_created": len(payloads)}
