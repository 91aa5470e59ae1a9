"""
Month windows, price buckets and parameter validation.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..errors import ServiceError


# Window bounds. The ceiling is always day 31: ISO dates compare lexically,
# so shorter months need no special casing.
FIRST_DAY = "01"
LAST_DAY = "31"

MONTH_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


class ValidationError(ServiceError):
    """Malformed query parameter."""
    pass


@dataclass(frozen=True)
class PriceBucket:
    """
    One histogram interval.

    ``lower`` is the label's lower bound. Matching uses the previous
    bucket's upper bound as an exclusive floor, so fractional prices
    between labels are not lost.
    """

    lower: int
    upper: Optional[int]  # None means unbounded
    floor: Optional[int] = None  # exclusive; None means price >= lower

    @property
    def label(self) -> str:
        return f"{self.lower}-{'above' if self.upper is None else self.upper}"


def _build_buckets() -> Tuple[PriceBucket, ...]:
    buckets = [PriceBucket(lower=0, upper=100)]
    for upper in range(200, 1000, 100):
        buckets.append(PriceBucket(lower=upper - 99, upper=upper, floor=upper - 100))
    buckets.append(PriceBucket(lower=901, upper=None, floor=900))
    return tuple(buckets)


PRICE_BUCKETS = _build_buckets()


def month_window(month: Optional[str]) -> Tuple[str, str]:
    """
    Inclusive date bounds for a ``YYYY-MM`` month.

    Raises:
        ValidationError: If the month is missing or malformed
    """
    if not month or not MONTH_PATTERN.fullmatch(month):
        raise ValidationError(f"Month must look like YYYY-MM, got {month!r}")
    return f"{month}-{FIRST_DAY}", f"{month}-{LAST_DAY}"


def page_offset(page: int, per_page: int, max_per_page: Optional[int] = None) -> int:
    """Row offset of a 1-based page."""
    if page < 1:
        raise ValidationError(f"page must be at least 1, got {page}")
    if per_page < 1:
        raise ValidationError(f"perPage must be at least 1, got {per_page}")
    if max_per_page is not None and per_page > max_per_page:
        raise ValidationError(f"perPage must be at most {max_per_page}, got {per_page}")
    return (page - 1) * per_page
