"""
Tests for month windows, price buckets and paging validation.
"""

import pytest

from app.analytics.window import (
    month_window,
    page_offset,
    ValidationError,
    PRICE_BUCKETS,
)
from app.analytics.charts import bucket_filter


class TestMonthWindow:
    """Tests for month_window function."""
    
    def test_window_spans_first_to_31st(self):
        assert month_window("2021-11") == ("2021-11-01", "2021-11-31")
    
    def test_short_month_still_uses_31(self):
        # Lexical comparison makes -31 a safe ceiling for February too
        assert month_window("2021-02") == ("2021-02-01", "2021-02-31")
    
    @pytest.mark.parametrize("month", [
        None, "", "2021", "2021-13", "2021-00", "21-01", "2021-1",
        "2021-01-01", "2021-01' OR '1'='1", "2021-05\n", " 2021-05",
    ])
    def test_malformed_month_rejected(self, month):
        with pytest.raises(ValidationError):
            month_window(month)


class TestPageOffset:
    """Tests for page_offset function."""
    
    def test_first_page_starts_at_zero(self):
        assert page_offset(1, 10) == 0
    
    def test_later_pages(self):
        assert page_offset(3, 10) == 20
        assert page_offset(2, 7) == 7
    
    def test_page_below_one_rejected(self):
        with pytest.raises(ValidationError):
            page_offset(0, 10)
    
    def test_per_page_below_one_rejected(self):
        with pytest.raises(ValidationError):
            page_offset(1, 0)
    
    def test_per_page_above_cap_rejected(self):
        with pytest.raises(ValidationError):
            page_offset(1, 101, max_per_page=100)
        assert page_offset(1, 100, max_per_page=100) == 0


class TestPriceBuckets:
    """Tests for the fixed histogram buckets."""
    
    def test_ten_buckets_in_ascending_order(self):
        assert [b.label for b in PRICE_BUCKETS] == [
            "0-100", "101-200", "201-300", "301-400", "401-500",
            "501-600", "601-700", "701-800", "801-900", "901-above",
        ]
    
    def test_first_bucket_is_inclusive_from_zero(self):
        flt = bucket_filter(PRICE_BUCKETS[0], "2021-01-01", "2021-01-31")
        assert flt.price_min == 0
        assert flt.price_above is None
        assert flt.price_max == 100
    
    def test_middle_bucket_starts_above_previous_upper(self):
        flt = bucket_filter(PRICE_BUCKETS[1], "2021-01-01", "2021-01-31")
        assert flt.price_min is None
        assert flt.price_above == 100
        assert flt.price_max == 200
    
    def test_last_bucket_is_unbounded(self):
        flt = bucket_filter(PRICE_BUCKETS[-1], "2021-01-01", "2021-01-31")
        assert flt.price_above == 900
        assert flt.price_max is None
        assert flt.sold_from == "2021-01-01"
        assert flt.sold_to == "2021-01-31"
