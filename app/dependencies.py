"""
FastAPI dependency injection.
The database handle and seed client are created once per process and
handed to every operation explicitly.
"""

from typing import Optional

from .config import Settings, settings
from .db import TransactionDatabase
from .seed import SeedClient


# Global instances (initialized on startup)
_db: Optional[TransactionDatabase] = None
_seed_client: Optional[SeedClient] = None


async def init_dependencies(config: Settings = settings):
    """Open and reset the database. Called on app startup."""
    global _db, _seed_client
    
    _db = TransactionDatabase(config.database_path)
    await _db.reset()
    
    _seed_client = SeedClient(config.seed_url, timeout=config.seed_timeout)


async def close_dependencies():
    """Close global dependencies. Called on app shutdown."""
    global _db, _seed_client
    if _seed_client:
        await _seed_client.close()
        _seed_client = None
    if _db:
        await _db.close()
        _db = None


def get_db() -> TransactionDatabase:
    """Get the database instance."""
    if _db is None:
        raise RuntimeError("Database not initialized")
    return _db


def get_seed_client() -> SeedClient:
    """Get the seed client instance."""
    if _seed_client is None:
        raise RuntimeError("Seed client not initialized")
    return _seed_client


def get_settings() -> Settings:
    return settings
