"""
SQLite database implementation.
Simple and direct - one table, every user value bound as a parameter.
"""

import asyncio
import dataclasses
import os
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterable, List, Optional, Tuple

import aiosqlite

from ..errors import ServiceError
from .models import Aggregate, CategoryCount, Transaction, TransactionFilter

TABLE = "product_transactions"
STAGING_TABLE = "product_transactions_staging"

SCHEMA = """
    CREATE TABLE IF NOT EXISTS {table} (
        id INTEGER PRIMARY KEY,
        title TEXT,
        description TEXT,
        price REAL,
        date_of_sale TEXT,
        category TEXT
    );
"""

INSERT = (
    "INSERT INTO {table} (title, description, price, date_of_sale, category) "
    "VALUES (?, ?, ?, ?, ?)"
)

AGGREGATE_SQL = {
    Aggregate.COUNT: "COUNT(*)",
    Aggregate.SUM: "COALESCE(SUM(price), 0)",
}

LIKE_ESCAPE = "\\"


class StoreError(ServiceError):
    """Underlying persistence failure."""
    pass


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_where(flt: TransactionFilter) -> Tuple[str, List[Any]]:
    """Translate a filter into a WHERE clause and its bound parameters."""
    clauses = ["1=1"]
    params: List[Any] = []

    if flt.search:
        pattern = f"%{escape_like(flt.search)}%"
        like = f"LIKE ? ESCAPE '{LIKE_ESCAPE}'"
        clauses.append(
            f"(title {like} OR description {like} OR category {like} "
            f"OR CAST(price AS TEXT) {like})"
        )
        params.extend([pattern] * 4)

    if flt.sold_from is not None:
        clauses.append("substr(date_of_sale, 1, 10) >= ?")
        params.append(flt.sold_from)

    if flt.sold_to is not None:
        clauses.append("substr(date_of_sale, 1, 10) <= ?")
        params.append(flt.sold_to)

    if flt.unsold_only:
        clauses.append("date_of_sale IS NULL")

    if flt.price_min is not None:
        clauses.append("price >= ?")
        params.append(flt.price_min)

    if flt.price_above is not None:
        clauses.append("price > ?")
        params.append(flt.price_above)

    if flt.price_max is not None:
        clauses.append("price <= ?")
        params.append(flt.price_max)

    if flt.has_category:
        clauses.append("category IS NOT NULL")

    return " AND ".join(clauses), params


def record_params(record: Dict[str, Any]) -> tuple:
    """Column values for one raw dataset object, missing keys as NULL."""
    return (
        record.get("title"),
        record.get("description"),
        record.get("price"),
        record.get("dateOfSale"),
        record.get("category"),
    )


class TransactionDatabase:
    """SQLite store of product transactions."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._connection: Optional[aiosqlite.Connection] = None
        self._write_lock = asyncio.Lock()

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get or create database connection."""
        if self._connection is None:
            os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
            async with self._guard("connect"):
                self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
        return self._connection

    @asynccontextmanager
    async def _guard(self, action: str):
        try:
            yield
        except aiosqlite.Error as e:
            # Drop partial writes so later commits cannot publish them
            if self._connection is not None:
                await self._connection.rollback()
            raise StoreError(f"{action} failed: {e}") from e

    async def close(self) -> None:
        """Close database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None

    # ===== Schema =====

    async def reset(self) -> None:
        """Drop and recreate the transactions table."""
        conn = await self._get_connection()
        async with self._write_lock, self._guard("reset"):
            await conn.executescript(
                f"DROP TABLE IF EXISTS {STAGING_TABLE};"
                f"DROP TABLE IF EXISTS {TABLE};"
                + SCHEMA.format(table=TABLE)
            )
            await conn.commit()

    # ===== Writes =====

    async def insert_many(self, records: Iterable[Dict[str, Any]]) -> int:
        """Append records, letting SQLite assign ids. Returns rows inserted."""
        rows = [record_params(r) for r in records]
        if not rows:
            return 0

        conn = await self._get_connection()
        async with self._write_lock, self._guard("insert"):
            await conn.executemany(INSERT.format(table=TABLE), rows)
            await conn.commit()
        return len(rows)

    async def replace_all(self, records: Iterable[Dict[str, Any]]) -> int:
        """
        Replace the whole dataset.

        Rows are loaded into a staging table first and swapped in with one
        script, so concurrent readers see either the old or the new rows.
        """
        rows = [record_params(r) for r in records]

        conn = await self._get_connection()
        async with self._write_lock, self._guard("replace"):
            await conn.executescript(
                f"DROP TABLE IF EXISTS {STAGING_TABLE};"
                + SCHEMA.format(table=STAGING_TABLE)
            )
            if rows:
                await conn.executemany(INSERT.format(table=STAGING_TABLE), rows)
            await conn.commit()
            await conn.executescript(
                f"""
                BEGIN;
                DROP TABLE IF EXISTS {TABLE};
                ALTER TABLE {STAGING_TABLE} RENAME TO {TABLE};
                COMMIT;
                """
            )
        return len(rows)

    # ===== Reads =====

    async def query(
        self,
        flt: TransactionFilter,
        limit: int = 10,
        offset: int = 0
    ) -> List[Transaction]:
        """Matching records ordered by id."""
        where, params = build_where(flt)
        params.extend([limit, offset])

        conn = await self._get_connection()
        async with self._guard("query"):
            cursor = await conn.execute(
                f"SELECT * FROM {TABLE} WHERE {where} ORDER BY id LIMIT ? OFFSET ?",
                params
            )
            rows = await cursor.fetchall()
        return [self._row_to_transaction(row) for row in rows]

    async def aggregate(self, flt: TransactionFilter, op: Aggregate) -> float:
        """Count of, or price sum over, matching records."""
        where, params = build_where(flt)

        conn = await self._get_connection()
        async with self._guard("aggregate"):
            cursor = await conn.execute(
                f"SELECT {AGGREGATE_SQL[op]} AS value FROM {TABLE} WHERE {where}",
                params
            )
            row = await cursor.fetchone()
        return row["value"]

    async def count_by_category(self, flt: TransactionFilter) -> List[CategoryCount]:
        """Per-category counts of matching records with a category."""
        where, params = build_where(dataclasses.replace(flt, has_category=True))

        conn = await self._get_connection()
        async with self._guard("group"):
            cursor = await conn.execute(
                f"""
                SELECT category, COUNT(*) AS item_count FROM {TABLE}
                WHERE {where}
                GROUP BY category
                ORDER BY category
                """,
                params
            )
            rows = await cursor.fetchall()
        return [
            CategoryCount(category=row["category"], item_count=row["item_count"])
            for row in rows
        ]

    async def count(self) -> int:
        return int(await self.aggregate(TransactionFilter(), Aggregate.COUNT))

    def _row_to_transaction(self, row: aiosqlite.Row) -> Transaction:
        """Convert a database row to a Transaction model."""
        return Transaction(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            price=row["price"],
            date_of_sale=row["date_of_sale"],
            category=row["category"]
        )
