"""
Profitability Metrics — Net profit, margin, per-order averages, monthly
trend and profit by channel.

Net profit is cash basis: paid revenue minus every recorded expense.
"Cost" in the per-order averages is therefore total expenses, not COGS,
and profit by channel is paid revenue minus that channel's ad spend only
(no inventory input here, unlike the sales report).
"""

from __future__ import annotations

from typing import Iterable

from ..core.channels import attribute_ad_spend
from ..core.records import expenses_frame, normalize_expenses, normalize_orders, orders_frame
from .financials import get_monthly_financials


def calculate_profitability(orders: Iterable, expenses: Iterable) -> dict:
    """
    Returns:
        {"net_profit": 30000.0, "margin": 24.0, "revenue": 125000.0, "total_expenses": 95000.0}
    """
    sales = orders_frame(orders)
    spend = expenses_frame(expenses)

    revenue = float(sales.loc[sales["is_paid"], "total_price"].sum())
    total_expenses = float(spend["amount"].sum())
    net_profit = revenue - total_expenses
    margin = (net_profit / revenue) * 100 if revenue > 0 else 0.0

    return {
        "net_profit": net_profit,
        "margin": float(margin),
        "revenue": revenue,
        "total_expenses": total_expenses,
    }


def calculate_average_business_metrics(orders: Iterable, expenses: Iterable) -> dict:
    """Revenue, cost (all expenses) and profit per valid order; zeros when there are none."""
    orders = normalize_orders(orders)
    valid_count = sum(1 for order in orders if order.is_valid)
    if valid_count == 0:
        return {
            "avg_revenue_per_order": 0.0,
            "avg_cost_per_order": 0.0,
            "avg_profit_per_order": 0.0,
        }

    totals = calculate_profitability(orders, expenses)
    return {
        "avg_revenue_per_order": totals["revenue"] / valid_count,
        "avg_cost_per_order": totals["total_expenses"] / valid_count,
        "avg_profit_per_order": totals["net_profit"] / valid_count,
    }


def _profit_by_source(orders, expenses) -> list[dict]:
    sales = orders_frame(orders)
    paid = sales[sales["is_paid"]]

    revenue = paid.groupby("source", sort=False)["total_price"].sum()
    value = revenue - attribute_ad_spend(revenue.index, expenses_frame(expenses))
    value = value[value != 0].sort_values(ascending=False, kind="stable")

    return [{"name": name, "value": float(amount)} for name, amount in value.items()]


def calculate_profitability_metrics(orders: Iterable, expenses: Iterable) -> dict:
    """
    Consolidated profitability report.

    Returns:
        {
          "monthly_data": [...],               # get_monthly_financials()
          "pie_data": [{"name": "Profit", "value": 30000.0},
                       {"name": "Expenses", "value": 95000.0}],
          "net_profit": 30000.0,
          "margin": 24.0,
          "revenue": 125000.0,
          "total_expenses": 95000.0,
          "avg_revenue_per_order": 1500.0,
          "avg_cost_per_order": 1140.0,
          "avg_profit_per_order": 360.0,
          "profitability_by_source": [{"name": "Facebook", "value": 1500.0}, ...]
        }
    """
    orders = normalize_orders(orders)
    expenses = normalize_expenses(expenses)

    totals = calculate_profitability(orders, expenses)
    averages = calculate_average_business_metrics(orders, expenses)

    pie_data = [
        {"name": "Profit", "value": max(0.0, totals["net_profit"])},
        {"name": "Expenses", "value": totals["total_expenses"]},
    ]

    return {
        "monthly_data": get_monthly_financials(orders, expenses),
        "pie_data": pie_data,
        **totals,
        **averages,
        "profitability_by_source": _profit_by_source(orders, expenses),
    }
