"""
Seed the catalog with demo products.

Empties the products table, then inserts a small fixed set of products.
Users are left untouched.

Usage:
    alembic upgrade head
    python -m scripts.seed_products [--dry-run]

Options:
    --dry-run       Show what would be inserted without making changes
"""

import argparse
import logging
import sys

from app.database.session import SessionLocal
from app.models.product import Product

logger = logging.getLogger("seed_products")

SEED_PRODUCTS = [
    {
        "title": "Notebook",
        "description": "Gaming notebook",
        "price": 4500.00,
        "image_url": "/images/notebook.png",
        "is_featured": True,
    },
    {
        "title": "Advanced Smartphone",
        "description": "Capture the best pictures",
        "price": 45.00,
        "image_url": "/images/smartphone.png",
        "is_featured": False,
    },
    {
        "title": "Advanced Tablet",
        "description": "Capture the best pictures",
        "price": 45.00,
        "image_url": "/images/tablet.png",
        "is_featured": False,
    },
]


def seed(db) -> int:
    """Replace every product with SEED_PRODUCTS. Returns the number inserted."""
    removed = db.query(Product).delete()
    logger.info("Removed %d existing products", removed)

    db.add_all(Product(**data) for data in SEED_PRODUCTS)
    db.commit()
    return len(SEED_PRODUCTS)


def main():
    parser = argparse.ArgumentParser(description="Seed the catalog with demo products")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be inserted without making changes",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
    logger.info("Seeding database...")

    if args.dry_run:
        for data in SEED_PRODUCTS:
            logger.info("Would insert %s (%.2f)", data["title"], data["price"])
        return 0

    db = SessionLocal()
    try:
        count = seed(db)
    except Exception:
        db.rollback()
        logger.exception("Failed to seed the database")
        return 1
    finally:
        db.close()

    logger.info("%d products created", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
