#!/usr/bin/env python3
"""
Standalone script to reset the database and seed it from the remote dataset.
Usage: cd /path/to/app && /path/to/venv/bin/python scripts/seed_db.py

This runs the seed without starting the web server. Note the server resets
the database on its own startup.
"""

import asyncio
import logging
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from app.db import TransactionDatabase
from app.seed import SeedClient, FetchError, initialize

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


async def main():
    logger.info(f"Seeding {settings.database_path} from {settings.seed_url}")
    
    db = TransactionDatabase(settings.database_path)
    await db.reset()
    
    try:
        async with SeedClient(settings.seed_url, timeout=settings.seed_timeout) as client:
            data = await initialize(db, client)
        
        logger.info(f"Seed completed: {len(data)} items fetched, {await db.count()} stored")
        
    except FetchError as e:
        logger.error(f"Seed failed: {e}")
        sys.exit(1)
            
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(main())
