"""
Analytics package - read and aggregation operations.
"""

from .window import (
    month_window,
    page_offset,
    ValidationError,
    PriceBucket,
    PRICE_BUCKETS,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
)
from .search import search
from .statistics import statistics
from .charts import price_histogram, category_distribution

__all__ = [
    "month_window",
    "page_offset",
    "ValidationError",
    "PriceBucket",
    "PRICE_BUCKETS",
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "search",
    "statistics",
    "price_histogram",
    "category_distribution",
]
