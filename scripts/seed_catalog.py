#!/usr/bin/env python3
"""
Load the default loan products into MongoDB.

Usage: python scripts/seed_catalog.py
Reads MONGODB_URI / MONGODB_DB_NAME from the environment (or .env).
Products whose type already exists are left untouched.
"""

import asyncio
import logging

from finloan.core import settings
from finloan.core.logging_config import setup_logging
from finloan.database.connection import init_db
from finloan.database.store import BeanieDocumentStore
from finloan.loan_catalog import seed_catalog

logger = logging.getLogger("seed_catalog")


async def main():
    setup_logging(settings.LOG_LEVEL)
    await init_db()
    inserted = await seed_catalog(BeanieDocumentStore())
    if inserted:
        logger.info(f"Inserted loan products: {', '.join(inserted)}")
    else:
        logger.info("Catalog already up to date")


if __name__ == "__main__":
    asyncio.run(main())
