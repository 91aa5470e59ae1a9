"""
Paginated transaction search.
"""

from typing import List, Optional

from ..db import Transaction, TransactionDatabase, TransactionFilter
from .window import DEFAULT_PAGE, DEFAULT_PER_PAGE, page_offset


async def search(
    db: TransactionDatabase,
    search_term: str = "",
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
    max_per_page: Optional[int] = None
) -> List[Transaction]:
    """
    One page of transactions matching ``search_term``, ordered by id.

    The term matches case-insensitively anywhere in the title, description,
    category or the textual price. An empty term matches everything.
    """
    offset = page_offset(page, per_page, max_per_page)
    return await db.query(
        TransactionFilter(search=search_term or None),
        limit=per_page,
        offset=offset
    )
