"""
Dates — Timezone-naive parsing, month bucketing and date-range filtering.

Report screens pass date-range bounds as 'YYYY-MM-DD' strings and compare
them against whatever the record stored ('2024-01-31', '2024-01-31T23:00:00',
ISO strings with offsets). Everything is compared as wall-clock time.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Iterable

import pandas as pd


_END_OF_DAY = pd.Timedelta(days=1) - pd.Timedelta(milliseconds=1)


def parse_date(value) -> pd.Timestamp | None:
    """
    Parse a stored ISO 8601 date into a naive Timestamp.

    Offset-aware values keep their wall-clock time (the offset is dropped,
    not converted). Returns None for missing or non-ISO values ('Jan',
    '15/01/2024').
    """
    if value is None:
        return None
    if isinstance(value, (pd.Timestamp, datetime, date)):
        ts = pd.Timestamp(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            ts = pd.to_datetime(text, format="ISO8601", errors="coerce")
        except (ValueError, OverflowError):
            return None

    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts


def month_key(value) -> str | None:
    """'2024-03-15T10:00:00' -> '2024-03'. None when the date does not parse."""
    ts = parse_date(value)
    return ts.strftime("%Y-%m") if ts is not None else None


def month_range(month: str) -> tuple[str, str]:
    """
    Convert a 'YYYY-MM' month picker value to its first and last day.

    Example:
        month_range('2024-02') → ('2024-02-01', '2024-02-29')
    """
    try:
        period = pd.Period(str(month).strip(), freq="M")
    except ValueError as exc:
        raise ValueError(f"Invalid month '{month}' (expected YYYY-MM)") from exc
    return (
        period.start_time.strftime("%Y-%m-%d"),
        period.end_time.strftime("%Y-%m-%d"),
    )


def _bound(value, name: str) -> pd.Timestamp:
    ts = parse_date(value)
    if ts is None:
        raise ValueError(f"Invalid {name} date '{value}' (expected YYYY-MM-DD)")
    return ts.normalize()


def _field_value(record, field: str):
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def filter_by_date_range(
    records: Iterable,
    date_field: str,
    start=None,
    end=None,
) -> list:
    """
    Keep the records whose *date_field* falls inside [start, end], inclusive.

    The range runs from start 00:00:00.000 to end 23:59:59.999.
    If either bound is missing the input is returned unfiltered (open range).
    Once a range is given, records with a missing or unparsable date are
    dropped.

    Args:
        records:    Mappings (raw storage records) or attribute-style records.
        date_field: Key/attribute holding the date, e.g. 'orderDate'.
        start, end: 'YYYY-MM-DD' strings or date/datetime objects.

    Returns:
        A new list with the same record objects, in input order.
    """
    if not start or not end:
        return list(records)

    lower = _bound(start, "start")
    upper = _bound(end, "end") + _END_OF_DAY

    kept = []
    for record in records:
        ts = parse_date(_field_value(record, date_field))
        if ts is not None and lower <= ts <= upper:
            kept.append(record)
    return kept
