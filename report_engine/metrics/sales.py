"""
Sales Metrics — Revenue, order volume and per-channel profitability.

Channel profit here is a gross figure: paid revenue minus cost of goods
(line quantity x current inventory unit cost) minus the channel's ad spend.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from ..core.channels import attribute_ad_spend
from ..core.records import (
    expenses_frame, inventory_frame, line_items_frame, normalize_orders, orders_frame,
)

logger = logging.getLogger(__name__)


def _cost_by_channel(orders, inventory) -> pd.Series:
    """COGS of paid orders per channel; items missing from inventory cost 0."""
    items = line_items_frame(orders)
    stock = inventory_frame(inventory).drop_duplicates("item_id")
    unit_costs = stock.dropna(subset=["item_id"]).set_index("item_id")["unit_cost"]

    paid = items[items["is_paid"]]
    cost = paid["quantity"] * paid["item_id"].map(unit_costs).fillna(0.0)
    return cost.groupby(paid["source"], sort=False).sum()


def calculate_sales_metrics(
    orders: Iterable,
    inventory: Iterable | None = None,
    expenses: Iterable | None = None,
) -> dict:
    """
    Compute headline revenue and per-channel volume / profitability.

    Args:
        orders:    Order records (raw dicts or OrderRecord).
        inventory: Inventory items, for unit costs.
        expenses:  Expense records, for ad spend ('Ads' category).

    Returns:
        {
          "revenue": 125000.0,          # paid orders only
          "total_orders": 84,           # every order, any status
          "source_data": [              # order volume per channel
            {"name": "Facebook", "value": 40}, ...
          ],
          "profitability_data": [       # paid revenue - COGS - ad spend
            {"name": "Facebook", "revenue": 80000.0, "profit": 52000.0}, ...
          ]
        }
    """
    orders = normalize_orders(orders)
    frame = orders_frame(orders)
    paid = frame[frame["is_paid"]]

    revenue = float(paid["total_price"].sum())

    stats = pd.DataFrame({"orders": frame.groupby("source", sort=False).size()})
    stats["revenue"] = paid.groupby("source", sort=False)["total_price"].sum()
    stats["cost"] = _cost_by_channel(orders, inventory)
    stats = stats.fillna(0.0)
    stats["ads_expense"] = attribute_ad_spend(stats.index, expenses_frame(expenses))
    stats["profit"] = stats["revenue"] - stats["cost"] - stats["ads_expense"]

    source_data = [
        {"name": name, "value": int(row.orders)}
        for name, row in stats.iterrows()
        if row.orders > 0
    ]
    profitability_data = [
        {"name": name, "revenue": float(row.revenue), "profit": float(row.profit)}
        for name, row in stats.iterrows()
        if row.revenue > 0 or row.profit != 0
    ]

    logger.debug(f"Sales metrics: {len(frame)} orders across {len(stats)} channel(s)")

    return {
        "revenue": revenue,
        "total_orders": int(len(frame)),
        "source_data": source_data,
        "profitability_data": profitability_data,
    }


TREND_GRANULARITIES = ("monthly", "yearly")


def get_revenue_trend(orders: Iterable, granularity: str = "monthly") -> list[dict]:
    """
    Paid revenue over time for the revenue area chart.

    Orders are dated by orderDate (falling back to createdDate); undated
    orders are left out. Status is ignored, as in calculate_sales_metrics().

    Args:
        orders:      Order records.
        granularity: "monthly" ('YYYY-MM' buckets) or "yearly" ('YYYY').

    Returns:
        [{"date": "2024-01", "revenue": 50000.0}, ...] ascending.
    """
    if granularity not in TREND_GRANULARITIES:
        raise ValueError(
            f"Unknown granularity '{granularity}' (expected one of: {', '.join(TREND_GRANULARITIES)})"
        )

    frame = orders_frame(orders)
    paid = frame[frame["is_paid"]].dropna(subset=["month"])
    buckets = paid["month"] if granularity == "monthly" else paid["month"].str[:4]

    revenue = paid.groupby(buckets)["total_price"].sum().sort_index()
    return [{"date": bucket, "revenue": float(value)} for bucket, value in revenue.items()]
