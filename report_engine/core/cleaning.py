"""
Cleaning — Numeric and text coercion shared by every report.

Storage hands over records exactly as the order-entry screens saved them:
numbers as strings, ids as ints in old records and strings in new ones,
blank fields as "" or missing keys. Everything here degrades to a neutral
value instead of raising, so one bad record never blocks a report.
"""

from __future__ import annotations

import re

import numpy as np
import pandas as pd

from ..config import NUMBER_GROUPINGS, settings


_STRIP_PATTERN = r"[\$,\s]"


def to_number(value) -> float:
    """
    Coerce a scalar to a finite float.

    Strips '$', ',' and whitespace from strings first.
    None, booleans, NaN, +/-inf and anything unparsable become 0.0.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return 0.0
    if isinstance(value, str):
        value = re.sub(_STRIP_PATTERN, "", value)
        if not value:
            return 0.0

    try:
        number = pd.to_numeric(value, errors="coerce")
    except TypeError:
        return 0.0
    if not np.isscalar(number) or pd.isna(number) or not np.isfinite(number):
        return 0.0
    return float(number)


def to_text(value) -> str | None:
    """Stringify a free-text field; None and NaN stay None."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    return value if isinstance(value, str) else str(value)


def normalize_id(value) -> str | None:
    """
    Normalize a record id for comparison.

    Legacy records store numeric ids, newer ones strings, so ids are always
    compared as strings. Integral floats lose their '.0'.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not np.isfinite(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    return text or None


def digits_only(value) -> str:
    """Keep only the digits of a phone-like value ('077 123-4567' -> '0771234567')."""
    return re.sub(r"\D", "", to_text(value) or "")


# ------------------------------------------------------------------
# Display formatting
# ------------------------------------------------------------------

def _group_indian(integer: str) -> str:
    """Group digits lakh/crore style: 1234567 -> 12,34,567."""
    if len(integer) <= 3:
        return integer
    head, tail = integer[:-3], integer[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(
    amount,
    symbol: str | None = None,
    grouping: str | None = None,
) -> str:
    """
    Format an amount as a currency string with two fixed decimals.

    Rules:
        None / non-numeric → treated as 0
        grouping "indian"  → Rs. 12,34,567.89
        grouping "western" → Rs. 1,234,567.89

    Args:
        amount:   Any scalar; coerced with to_number().
        symbol:   Prefix. Defaults to settings.CURRENCY_SYMBOL ("" for none).
        grouping: "indian" or "western". Defaults to settings.NUMBER_GROUPING.
    """
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    grouping = grouping or settings.NUMBER_GROUPING
    if grouping not in NUMBER_GROUPINGS:
        raise ValueError(f"Unknown grouping '{grouping}'")

    value = to_number(amount)
    integer, fraction = f"{abs(value):.2f}".split(".")
    grouped = _group_indian(integer) if grouping == "indian" else f"{int(integer):,}"
    sign = "-" if value < 0 and (integer, fraction) != ("0", "00") else ""

    text = f"{sign}{grouped}.{fraction}"
    return f"{symbol} {text}" if symbol else text
