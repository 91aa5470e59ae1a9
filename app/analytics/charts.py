"""
Chart data: price-range histogram and category distribution.
"""

import asyncio
from typing import List

from ..db import (
    Aggregate, CategoryCount, PriceRangeCount, TransactionDatabase, TransactionFilter
)
from .window import PRICE_BUCKETS, PriceBucket, month_window


def bucket_filter(bucket: PriceBucket, start: str, end: str) -> TransactionFilter:
    """Filter for in-window records priced inside ``bucket``."""
    return TransactionFilter(
        sold_from=start,
        sold_to=end,
        price_min=bucket.lower if bucket.floor is None else None,
        price_above=bucket.floor,
        price_max=bucket.upper
    )


async def price_histogram(db: TransactionDatabase, month: str) -> List[PriceRangeCount]:
    """Item counts for every price bucket, in ascending bucket order."""
    start, end = month_window(month)

    counts = await asyncio.gather(*[
        db.aggregate(bucket_filter(bucket, start, end), Aggregate.COUNT)
        for bucket in PRICE_BUCKETS
    ])

    return [
        PriceRangeCount(price_range=bucket.label, item_count=int(count))
        for bucket, count in zip(PRICE_BUCKETS, counts)
    ]


async def category_distribution(db: TransactionDatabase, month: str) -> List[CategoryCount]:
    """Item counts per category sold in ``month``. Empty categories are omitted."""
    start, end = month_window(month)
    return await db.count_by_category(TransactionFilter(sold_from=start, sold_to=end))
