#!/usr/bin/env python3
"""Seed product catalog script.

Deletes every product and inserts the embedded seed catalog.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.catalog.seed import seed_catalog
from app.catalog.service import ProductService
from app.infrastructure.config import settings
from app.infrastructure.database import async_session_factory, create_tables, engine
from app.infrastructure.logging_config import configure_logging


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Replace the product catalog with seed data",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create database tables before seeding",
    )

    args = parser.parse_args()
    configure_logging(settings.log_level)

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)

    if args.create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        result = await seed_catalog(ProductService(async_session_factory))
        print(f"  ✓ Deleted: {result['deleted']} existing products")
        print(f"  ✓ Created: {result['products_created']} products")
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
