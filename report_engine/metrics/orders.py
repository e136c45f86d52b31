"""
Order Metrics — Status mix, order value, fulfilment speed, seasonality,
districts and repeat customers.

"Valid" orders exclude cancelled and returned ones. The status breakdown
is the only figure computed over every order.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import pandas as pd

from ..config import settings
from ..core.dates import parse_date
from ..core.records import orders_frame

logger = logging.getLogger(__name__)


def _status_label(status) -> str:
    """Missing status → 'New Order'; first letter upper-cased ('pending' → 'Pending')."""
    text = status or settings.DEFAULT_ORDER_STATUS
    return text[0].upper() + text[1:]


def _processing_days(frame: pd.DataFrame) -> list[int]:
    """
    Whole days from creation to dispatch for dispatched orders.

    Truncated toward zero; orders with a missing/unparsable date or a
    negative duration are skipped.
    """
    dispatched = frame[frame["status"] == settings.DISPATCHED_STATUS]
    days: list[int] = []
    for created, dispatched_at in zip(dispatched["created_date"], dispatched["dispatch_date"]):
        start, end = parse_date(created), parse_date(dispatched_at)
        if start is None or end is None:
            continue
        elapsed = int(np.trunc((end - start) / pd.Timedelta(days=1)))
        if elapsed >= 0:
            days.append(elapsed)
    return days


def calculate_order_metrics(orders: Iterable) -> dict:
    """
    Compute order-level KPIs.

    Returns:
        {
          "status_data": [{"name": "Dispatched", "value": 30}, ...],  # all orders
          "avg_processing_time": "2.5",   # days created → dispatched; "0" when none
          "avg_order_value": "1850.75",   # valid orders, 2 decimals; 0 when none
          "monthly_volume": [{"date": "2024-01", "count": 12}, ...],
          "district_data": [{"name": "Colombo", "value": 18}, ...],
          "top_district": "Colombo",      # or "N/A"
          "repeat_rate": 12.5,            # % of customers with 2+ valid orders
          "total_orders": 80              # valid orders
        }
    """
    frame = orders_frame(orders)
    valid = frame[frame["is_valid"]]

    # --- Status distribution (every order) ---
    labels = frame["status"].map(_status_label)
    status_counts = labels.groupby(labels, sort=False).size()
    status_data = [{"name": name, "value": int(count)} for name, count in status_counts.items()]

    # --- Average order value ---
    valid_count = len(valid)
    avg_order_value = f"{float(valid['total_price'].sum()) / valid_count:.2f}" if valid_count else 0

    # --- Processing time ---
    days = _processing_days(frame)
    avg_processing_time = f"{float(np.mean(days)):.1f}" if days else "0"

    # --- Seasonality ---
    volume = valid.dropna(subset=["month"]).groupby("month").size().sort_index()
    monthly_volume = [{"date": month, "count": int(count)} for month, count in volume.items()]

    # --- District breakdown ---
    districts = (
        valid.dropna(subset=["district"]).groupby("district", sort=False).size()
        .sort_values(ascending=False, kind="stable")
    )
    district_data = [{"name": name, "value": int(count)} for name, count in districts.items()]
    top_district = district_data[0]["name"] if district_data else "N/A"

    # --- Repeat customers ---
    per_customer = valid.dropna(subset=["customer_key"]).groupby("customer_key").size()
    total_customers = len(per_customer)
    returning = int((per_customer > 1).sum())
    repeat_rate = round(returning / total_customers * 100, 1) if total_customers else 0.0

    logger.debug(f"Order metrics: {valid_count} valid of {len(frame)} orders")

    return {
        "status_data": status_data,
        "avg_processing_time": avg_processing_time,
        "avg_order_value": avg_order_value,
        "monthly_volume": monthly_volume,
        "district_data": district_data,
        "top_district": top_district,
        "repeat_rate": repeat_rate,
        "total_orders": int(valid_count),
    }
