"""
Chart data routes.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ..analytics import category_distribution, price_histogram
from ..db import CategoryCount, PriceRangeCount, TransactionDatabase
from ..dependencies import get_db

router = APIRouter()


@router.get("/price-range-chart", response_model=List[PriceRangeCount])
async def price_range_chart(
    month: str = Query(...),
    db: TransactionDatabase = Depends(get_db)
):
    """Item counts per price bucket for a month."""
    return await price_histogram(db, month)


@router.get("/pie-chart", response_model=List[CategoryCount])
async def pie_chart(
    month: str = Query(...),
    db: TransactionDatabase = Depends(get_db)
):
    """Item counts per category for a month."""
    return await category_distribution(db, month)
