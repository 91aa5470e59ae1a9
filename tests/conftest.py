"""
Shared fixtures: a fresh SQLite database per test and sample records.
"""

import pytest
import pytest_asyncio

from app.db import TransactionDatabase


def make_record(title="Item", price=10.0, date="2021-05-10", category="misc", description=""):
    """Raw dataset object as the seed source serves it."""
    return {
        "title": title,
        "description": description,
        "price": price,
        "dateOfSale": date,
        "category": category,
    }


@pytest.fixture
def sample_records():
    return [
        make_record("Backpack", 109.95, "2021-11-27T20:29:54+05:30", "men's clothing",
                    "Fits 15 Laptops"),
        make_record("Slim Fit T-Shirt", 22.3, "2021-10-27", "men's clothing",
                    "Slim-fitting style"),
        make_record("Gold Ring", 695.0, "2021-11-15", "jewelery", "Silver dragon"),
        make_record("SSD 1TB", 109.0, "2021-11-31", "electronics", "Fast boot"),
        make_record("Rain Jacket", 39.99, None, "women's clothing", "Lightweight"),
        make_record("Monitor", 999.99, "2021-12-01", "electronics", "21.5 inch"),
        make_record("Unlabelled", 5.0, "2021-11-02", None, "No category"),
    ]


@pytest_asyncio.fixture
async def db(tmp_path):
    database = TransactionDatabase(str(tmp_path / "test.db"))
    await database.reset()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def seeded_db(db, sample_records):
    await db.insert_many(sample_records)
    return db
