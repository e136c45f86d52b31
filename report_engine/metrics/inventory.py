"""
Inventory Metrics — Stock value, low-stock alerts and stock-status mix.

A reorder level of 0 means no threshold is configured: such items are
never flagged, whatever their stock.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..core.records import inventory_frame


STOCK_STATUSES = ["In Stock", "Low Stock", "Out of Stock"]


def calculate_inventory_metrics(inventory: Iterable) -> dict:
    """
    Returns:
        {
          "status_data": [{"name": "In Stock", "value": 40},
                          {"name": "Low Stock", "value": 3},
                          {"name": "Out of Stock", "value": 1}],
          "low_stock_items": [          # ascending by quantity
            {"name": "Glue", "category": "Hardware", "quantity": 2.0, "min_stock": 5.0}, ...
          ],
          "total_value": 85000.0,       # sum of stock x unit cost
          "stock_alerts": 4             # len(low_stock_items)
        }
    """
    frame = inventory_frame(inventory)
    stock, level = frame["current_stock"], frame["reorder_level"]

    total_value = float((stock * frame["unit_cost"]).sum())

    has_threshold = level > 0
    low = frame[has_threshold & (stock <= level)].sort_values("current_stock", kind="stable")
    low_stock_items = [
        {
            "name": row.name,
            "category": row.category,
            "quantity": float(row.current_stock),
            "min_stock": float(row.reorder_level),
        }
        for row in low.itertuples(index=False)
    ]

    conditions = [
        has_threshold & (stock <= 0),
        has_threshold & (stock <= level),
    ]
    statuses = np.select(conditions, ["Out of Stock", "Low Stock"], default="In Stock")
    status_data = [
        {"name": status, "value": int((statuses == status).sum())}
        for status in STOCK_STATUSES
    ]

    return {
        "status_data": status_data,
        "low_stock_items": low_stock_items,
        "total_value": total_value,
        "stock_alerts": len(low_stock_items),
    }
