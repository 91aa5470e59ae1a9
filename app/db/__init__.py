"""
Database package - SQLite only.
"""

from .models import (
    Transaction, MonthlyStatistics, PriceRangeCount, CategoryCount,
    Aggregate, TransactionFilter
)
from .sqlite import TransactionDatabase, StoreError

__all__ = [
    "TransactionDatabase",
    "StoreError",
    "Transaction",
    "MonthlyStatistics",
    "PriceRangeCount",
    "CategoryCount",
    "Aggregate",
    "TransactionFilter",
]
