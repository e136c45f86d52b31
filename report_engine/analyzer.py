"""
Report Analyzer — The single entry point for the Reports screen.

Orchestrates all metric modules and returns one consolidated "Report
Snapshot" dictionary that any consumer (report pages, export, API) can
use directly.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .core.dates import filter_by_date_range
from .ingestor import ReportIngestor
from .metrics.consumption import calculate_consumption_trends
from .metrics.expenses import calculate_expense_metrics, get_expense_trend
from .metrics.inventory import calculate_inventory_metrics
from .metrics.orders import calculate_order_metrics
from .metrics.products import get_top_revenue_products, get_top_selling_products
from .metrics.profitability import calculate_profitability_metrics
from .metrics.sales import calculate_sales_metrics, get_revenue_trend

logger = logging.getLogger(__name__)


class ReportAnalyzer:
    """
    Takes loaded collections and produces every report in one pass.

    Usage:
        analyzer = ReportAnalyzer()
        snapshot = analyzer.analyze(orders, expenses, inventory, catalog,
                                    start="2024-01-01", end="2024-01-31")
    """

    def analyze(
        self,
        orders: Iterable | None = None,
        expenses: Iterable | None = None,
        inventory: Iterable | None = None,
        catalog=None,
        start=None,
        end=None,
        granularity: str = "monthly",
    ) -> dict:
        """
        Run all report calculations and return a Report Snapshot.

        The date range (inclusive 'YYYY-MM-DD' bounds) applies to orders by
        orderDate and to expenses by date. Inventory is a point-in-time
        snapshot and is never filtered. *granularity* ("monthly" or "yearly")
        sets the revenue trend buckets.

        Returns:
            {
              "meta":                 { "start": ..., "end": ..., "orders": 84, ... },
              "sales":                { ... },   # metrics.sales
              "revenue_trend":        [ ... ],   # metrics.sales (paid revenue over time)
              "top_products":         [ ... ],   # metrics.products (by quantity)
              "top_revenue_products": [ ... ],   # metrics.products (by revenue)
              "expenses":             { ... },   # metrics.expenses
              "expense_trend":        [ ... ],   # metrics.expenses (spend per month)
              "orders":               { ... },   # metrics.orders
              "profitability":        { ... },   # metrics.profitability
              "inventory":            { ... },   # metrics.inventory
              "consumption":          { ... },   # metrics.consumption
            }
        """
        data = ReportIngestor().ingest(orders, expenses, inventory, catalog)

        scoped_orders = filter_by_date_range(data.orders, "order_date", start, end)
        scoped_expenses = filter_by_date_range(data.expenses, "date", start, end)

        logger.info(
            f"Analyzing {len(scoped_orders)}/{len(data.orders)} orders and "
            f"{len(scoped_expenses)}/{len(data.expenses)} expenses "
            f"for range {start or '*'} → {end or '*'}"
        )

        snapshot: dict = {
            "meta": {
                "start": start,
                "end": end,
                "orders": len(scoped_orders),
                "expenses": len(scoped_expenses),
                "inventory_items": len(data.inventory),
                "skipped": data.skipped,
            },
            "sales": calculate_sales_metrics(scoped_orders, data.inventory, scoped_expenses),
            "revenue_trend": get_revenue_trend(scoped_orders, granularity),
            "top_products": get_top_selling_products(scoped_orders, data.inventory, data.catalog),
            "top_revenue_products": get_top_revenue_products(scoped_orders, data.inventory, data.catalog),
            "expenses": calculate_expense_metrics(scoped_expenses, scoped_orders),
            "expense_trend": get_expense_trend(scoped_expenses),
            "orders": calculate_order_metrics(scoped_orders),
            "profitability": calculate_profitability_metrics(scoped_orders, scoped_expenses),
            "inventory": calculate_inventory_metrics(data.inventory),
            "consumption": calculate_consumption_trends(scoped_orders, data.inventory, data.catalog),
        }

        return snapshot
