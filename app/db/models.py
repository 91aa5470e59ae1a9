"""
Pydantic models for stored records and query results.
JSON field names are camelCase to match the seed dataset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(CamelModel):
    """A single product transaction record."""
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    price: Union[float, str, None] = None  # stored verbatim; may be non-numeric
    date_of_sale: Optional[str] = None  # "YYYY-MM-DD"; None means not sold
    category: Optional[str] = None


class MonthlyStatistics(CamelModel):
    """Sales summary for one month."""
    total_sale_amount: float = 0
    total_sold_items: int = 0
    total_not_sold_items: int = 0


class PriceRangeCount(CamelModel):
    """One histogram bucket."""
    price_range: str
    item_count: int


class CategoryCount(CamelModel):
    """Number of records of a category."""
    category: str
    item_count: int


class Aggregate(str, Enum):
    """Scalar aggregation over matching records."""
    COUNT = "count"
    SUM = "sum"


@dataclass(frozen=True)
class TransactionFilter:
    """
    Predicate over stored records. Unset fields do not constrain.

    Date bounds compare against the first ten characters of dateOfSale,
    so both plain dates and full ISO timestamps fall in the right month.
    """
    search: Optional[str] = None
    sold_from: Optional[str] = None
    sold_to: Optional[str] = None
    unsold_only: bool = False
    price_min: Optional[float] = None  # inclusive
    price_above: Optional[float] = None  # exclusive
    price_max: Optional[float] = None  # inclusive
    has_category: bool = False
