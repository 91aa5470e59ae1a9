"""
Monthly sales statistics.
"""

import asyncio

from ..db import Aggregate, MonthlyStatistics, TransactionDatabase, TransactionFilter
from .window import month_window


async def statistics(db: TransactionDatabase, month: str) -> MonthlyStatistics:
    """
    Sale total and sold count for ``month``.

    The not-sold count covers every undated record regardless of month.
    """
    start, end = month_window(month)
    in_window = TransactionFilter(sold_from=start, sold_to=end)

    total_amount, sold, not_sold = await asyncio.gather(
        db.aggregate(in_window, Aggregate.SUM),
        db.aggregate(in_window, Aggregate.COUNT),
        db.aggregate(TransactionFilter(unsold_only=True), Aggregate.COUNT),
    )

    return MonthlyStatistics(
        total_sale_amount=total_amount or 0,
        total_sold_items=sold or 0,
        total_not_sold_items=not_sold or 0
    )
