"""
Expense Metrics — Totals, category breakdown and biggest spend items.
"""

from __future__ import annotations

from typing import Iterable

from ..config import settings
from ..core.records import expenses_frame, orders_frame


def calculate_expense_metrics(
    expenses: Iterable,
    orders: Iterable | None = None,
) -> dict:
    """
    Summarize spending and relate it to paid sales.

    Returns:
        {
          "total": 42000.0,
          "category_data": [{"name": "Ads", "value": 15000.0}, ...],   # descending
          "expense_sales_ratio": 33.6,     # % of paid revenue; 0 when no paid revenue
          "top_category": {"name": "Ads", "value": 15000.0},           # or N/A / 0
          "top_items": [                   # top 5 by amount
            {"name": "Facebook", "amount": 9000.0, "category": "Ads"}, ...
          ]
        }
    """
    frame = expenses_frame(expenses)
    sales = orders_frame(orders)

    total = float(frame["amount"].sum())
    total_sales = float(sales.loc[sales["is_paid"], "total_price"].sum())
    expense_sales_ratio = (total / total_sales) * 100 if total_sales > 0 else 0.0

    by_category = (
        frame.groupby("category", sort=False)["amount"].sum()
        .sort_values(ascending=False, kind="stable")
    )
    category_data = [
        {"name": name, "value": float(value)} for name, value in by_category.items()
    ]
    top_category = category_data[0] if category_data else {"name": "N/A", "value": 0.0}

    by_item = (
        frame.groupby("label", sort=False)
        .agg(amount=("amount", "sum"), category=("category", "first"))
        .sort_values("amount", ascending=False, kind="stable")
        .head(settings.TOP_EXPENSE_ITEMS_LIMIT)
    )
    top_items = [
        {"name": name, "amount": float(row.amount), "category": row.category}
        for name, row in by_item.iterrows()
    ]

    return {
        "total": total,
        "category_data": category_data,
        "expense_sales_ratio": float(expense_sales_ratio),
        "top_category": top_category,
        "top_items": top_items,
    }


def get_expense_trend(expenses: Iterable) -> list[dict]:
    """
    Spending per month for the expense trend chart.

    Returns:
        [{"date": "2024-01", "amount": 20000.0}, ...] ascending; undated
        expenses are left out.
    """
    frame = expenses_frame(expenses).dropna(subset=["month"])
    monthly = frame.groupby("month")["amount"].sum().sort_index()
    return [{"date": month, "amount": float(amount)} for month, amount in monthly.items()]
