"""
Loads the remote dataset into the store.
"""

import logging
from typing import Any, List

from ..db import TransactionDatabase
from .client import SeedClient

logger = logging.getLogger(__name__)


async def initialize(
    db: TransactionDatabase,
    client: SeedClient,
    replace: bool = False
) -> List[Any]:
    """
    Fetch the dataset and store every object in it.

    Without ``replace`` the rows are appended, so calling this twice
    stores everything twice. With ``replace`` the previous rows are
    swapped out atomically.

    Array elements that are not JSON objects have no fields to store, so
    they are skipped (with a warning) rather than inserted as all-null
    rows. They still appear in the returned payload.

    Returns the fetched dataset exactly as received.
    """
    logger.info(f"Fetching seed data from {client.url}")
    data = await client.fetch()

    records = [item for item in data if isinstance(item, dict)]
    skipped = len(data) - len(records)
    if skipped:
        logger.warning(f"Skipping {skipped} seed items that are not objects")

    if replace:
        inserted = await db.replace_all(records)
    else:
        inserted = await db.insert_many(records)

    logger.info(
        f"Seeded {inserted} transactions ({'replaced' if replace else 'appended'})"
    )
    return data
