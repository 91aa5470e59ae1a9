"""
Seed module - remote dataset fetch and load.
"""

from app.seed.client import SeedClient, FetchError
from app.seed.seeder import initialize

__all__ = [
    "SeedClient",
    "FetchError",
    "initialize",
]
