"""
Transaction listing and statistics routes.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ..analytics import DEFAULT_PAGE, DEFAULT_PER_PAGE, search, statistics
from ..config import Settings
from ..db import MonthlyStatistics, Transaction, TransactionDatabase
from ..dependencies import get_db, get_settings

router = APIRouter()


@router.get("/list-transactions", response_model=List[Transaction])
async def list_transactions(
    search_term: str = Query("", alias="search"),
    page: int = Query(DEFAULT_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE, alias="perPage"),
    db: TransactionDatabase = Depends(get_db),
    config: Settings = Depends(get_settings)
):
    """One page of transactions matching the search term."""
    return await search(
        db, search_term, page, per_page, max_per_page=config.max_per_page
    )


@router.get("/statistics", response_model=MonthlyStatistics)
async def monthly_statistics(
    month: str = Query(...),
    db: TransactionDatabase = Depends(get_db)
):
    """Sale total, sold and not-sold counts for a month."""
    return await statistics(db, month)
