"""
Routes package.
"""

from .seed import router as seed_router
from .transactions import router as transactions_router
from .charts import router as charts_router

__all__ = [
    "seed_router",
    "transactions_router",
    "charts_router",
]
