"""
Consumption Trends — Units consumed per product per month (valid orders).

Feeds the multi-line demand chart: one line per high-demand product.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..config import settings
from ..core.dates import month_key
from ..core.identity import ProductResolver
from ..core.records import normalize_orders


def calculate_consumption_trends(
    orders: Iterable,
    inventory: Iterable | None = None,
    catalog=None,
    limit: int | None = None,
) -> dict:
    """
    Returns:
        {
          "chart_data": [                       # ascending by month
            {"date": "2024-01", "Frame A": 4.0, "Mug": 10.0},
            {"date": "2024-02", "Mug": 6.0},    # only products used that month
          ],
          "top_items": ["Mug", "Frame A", ...]  # highest total quantity first
        }
    """
    limit = settings.TOP_CONSUMPTION_ITEMS_LIMIT if limit is None else limit
    resolver = ProductResolver(catalog=catalog, inventory=inventory)

    rows = []
    for order in normalize_orders(orders):
        if not order.is_valid:
            continue
        month = month_key(order.effective_date)
        if month is None:
            continue
        for item in order.line_items:
            name, _ = resolver.resolve_name(item)
            rows.append({"date": month, "name": name, "quantity": item.quantity})

    usage = pd.DataFrame(rows, columns=["date", "name", "quantity"])

    totals = usage.groupby("name", sort=False)["quantity"].sum()
    top_items = list(totals.sort_values(ascending=False, kind="stable").head(limit).index)

    monthly = usage.groupby(["date", "name"], sort=False)["quantity"].sum()
    by_month: dict[str, dict] = {}
    for (month, name), quantity in monthly.items():
        by_month.setdefault(month, {"date": month})[name] = float(quantity)

    return {
        "chart_data": [by_month[month] for month in sorted(by_month)],
        "top_items": top_items,
    }
