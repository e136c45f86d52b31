"""
Monthly Financials — Revenue vs expenses per calendar month.

Shared by the profitability report and the spreadsheet export.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..core.records import expenses_frame, orders_frame


def get_monthly_financials(
    orders: Iterable,
    expenses: Iterable,
) -> list[dict]:
    """
    Bucket paid revenue and all expenses by 'YYYY-MM'.

    Orders are dated by orderDate (falling back to createdDate), expenses
    by date. Records without a parseable date are left out.

    Returns:
        [
          {"date": "2024-01", "revenue": 50000.0, "expenses": 20000.0, "profit": 30000.0},
          ...
        ]
        Ascending by month.
    """
    sales = orders_frame(orders)
    spend = expenses_frame(expenses)

    paid = sales[sales["is_paid"]].dropna(subset=["month"])
    monthly = pd.DataFrame({
        "revenue": paid.groupby("month")["total_price"].sum(),
        "expenses": spend.dropna(subset=["month"]).groupby("month")["amount"].sum(),
    }).fillna(0.0).sort_index()
    monthly["profit"] = monthly["revenue"] - monthly["expenses"]

    return [
        {
            "date": month,
            "revenue": float(row.revenue),
            "expenses": float(row.expenses),
            "profit": float(row.profit),
        }
        for month, row in monthly.iterrows()
    ]
