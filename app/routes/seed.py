"""
Database seeding route.
"""

from fastapi import APIRouter, Depends

from ..config import Settings
from ..db import TransactionDatabase
from ..dependencies import get_db, get_seed_client, get_settings
from ..seed import SeedClient, initialize

router = APIRouter()


@router.get("/initialize-database")
async def initialize_database(
    db: TransactionDatabase = Depends(get_db),
    client: SeedClient = Depends(get_seed_client),
    config: Settings = Depends(get_settings)
):
    """Fetch the remote dataset into the store and echo it back."""
    data = await initialize(db, client, replace=config.seed_replace_existing)
    return {"message": data}
