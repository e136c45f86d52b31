"""
Tests for core.dates — inclusive date-range filtering and month helpers.
"""

from datetime import date

import pytest

from report_engine.core.dates import filter_by_date_range, month_key, month_range, parse_date
from report_engine.schemas import OrderRecord


def _order(order_date, order_id="ORD"):
    return {"id": order_id, "orderDate": order_date}


class TestFilterByDateRange:

    def test_end_date_is_inclusive_to_the_last_millisecond(self):
        orders = [
            _order("2024-01-31T23:00:00", "in"),
            _order("2024-02-01T00:00:00", "out"),
        ]

        result = filter_by_date_range(orders, "orderDate", "2024-01-01", "2024-01-31")

        assert [o["id"] for o in result] == ["in"]

    def test_start_date_is_inclusive_from_midnight(self):
        orders = [
            _order("2023-12-31T23:59:59", "before"),
            _order("2024-01-01T00:00:00", "midnight"),
            _order("2024-01-01", "date-only"),
        ]

        result = filter_by_date_range(orders, "orderDate", "2024-01-01", "2024-01-31")

        assert [o["id"] for o in result] == ["midnight", "date-only"]

    def test_missing_bound_means_open_range(self):
        orders = [_order("2024-01-05"), _order(None), _order("not a date")]

        assert filter_by_date_range(orders, "orderDate", None, "2024-01-31") == orders
        assert filter_by_date_range(orders, "orderDate", "2024-01-01", "") == orders

    def test_returns_a_new_list_of_the_same_records(self):
        orders = [_order("2024-01-05")]

        result = filter_by_date_range(orders, "orderDate", "2024-01-01", "2024-01-31")

        assert result is not orders
        assert result[0] is orders[0]

    def test_undated_records_are_dropped_once_a_range_is_set(self):
        orders = [
            _order(None, "none"), _order("not a date", "junk"), _order("Jan", "word"), _order("2024-01-10", "ok"),
        ]

        result = filter_by_date_range(orders, "orderDate", "2024-01-01", "2024-01-31")

        assert [o["id"] for o in result] == ["ok"]

    def test_offsets_compare_as_wall_clock_time(self):
        orders = [_order("2024-01-31T23:30:00+05:30", "late")]

        result = filter_by_date_range(orders, "orderDate", "2024-01-01", "2024-01-31")

        assert len(result) == 1

    def test_works_on_schema_objects(self):
        orders = [OrderRecord.model_validate(_order("2024-01-15"))]

        assert len(filter_by_date_range(orders, "order_date", "2024-01-01", "2024-01-31")) == 1

    def test_accepts_date_objects_as_bounds(self):
        orders = [_order("2024-01-15")]

        result = filter_by_date_range(orders, "orderDate", date(2024, 1, 15), date(2024, 1, 15))

        assert len(result) == 1

    def test_unparsable_bound_raises(self):
        with pytest.raises(ValueError, match="start"):
            filter_by_date_range([], "orderDate", "someday", "2024-01-31")


class TestParseDate:

    def test_drops_timezone(self):
        ts = parse_date("2024-03-01T10:00:00Z")
        assert ts.tzinfo is None
        assert ts.hour == 10

    @pytest.mark.parametrize("raw", [None, "", "  ", "garbage", "Jan", "15/01/2024"])
    def test_unparsable_is_none(self, raw):
        assert parse_date(raw) is None

    @pytest.mark.parametrize("raw", ["2024-01-15", "2024-01-15T08:30:00", "2024-01-15 08:30:00", "2024-01-15T08:30:00.123Z"])
    def test_iso_variants(self, raw):
        assert parse_date(raw).strftime("%Y-%m-%d") == "2024-01-15"


class TestMonthHelpers:

    def test_month_key(self):
        assert month_key("2024-03-15T10:00:00") == "2024-03"
        assert month_key("2024-03-15") == "2024-03"

    def test_month_key_of_bad_date_is_none(self):
        assert month_key("nope") is None
        assert month_key("Jan") is None
        assert month_key(None) is None

    @pytest.mark.parametrize("month, expected", [
        ("2024-02", ("2024-02-01", "2024-02-29")),
        ("2023-02", ("2023-02-01", "2023-02-28")),
        ("2023-12", ("2023-12-01", "2023-12-31")),
    ])
    def test_month_range(self, month, expected):
        assert month_range(month) == expected

    def test_month_range_rejects_garbage(self):
        with pytest.raises(ValueError):
            month_range("not-a-month")
