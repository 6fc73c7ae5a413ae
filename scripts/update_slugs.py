#!/usr/bin/env python3
"""
Backfill product slugs.

Finds products whose slug is null or empty and stores the slug generated
from the product name. One failing product does not stop the run.

Usage:
    python scripts/update_slugs.py
"""
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from eticaret.logging import get_logger, sanitize_string_for_logging
from eticaret.services.database import Database, get_database_async
from eticaret.services.slugs import create_slug

logger = get_logger("update_slugs")


async def update_product_slugs(db: Database) -> int:
    """Store generated slugs for products without one. Returns how many were updated."""
    products = await db.products.get_without_slug()
    if not products:
        logger.info("All products already have a slug")
        return 0

    logger.info(f"Generating slugs for {len(products)} products")
    updated = 0
    for product in products:
        slug = create_slug(product.name)
        try:
            await db.products.update(product.id, {"slug": slug})
        except Exception as e:
            logger.error(f"Could not update slug for '{sanitize_string_for_logging(product.name)}': {e}")
            continue
        logger.info(f"'{sanitize_string_for_logging(product.name)}' -> '{slug}'")
        updated += 1

    logger.info(f"Slug backfill finished: {updated}/{len(products)} updated")
    return updated


async def main() -> int:
    db = await get_database_async()
    await update_product_slugs(db)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
