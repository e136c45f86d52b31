"""
Report Export — Sheet data for the "Full Business Report" workbook.

Builds one DataFrame per sheet; writing the workbook (e.g. with
DataFrame.to_excel) is left to the caller.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .core.dates import filter_by_date_range
from .core.identity import ProductResolver
from .core.records import normalize_expenses, normalize_inventory, normalize_orders
from .metrics.financials import get_monthly_financials

SALES_COLUMNS = ["ID", "Date", "Customer", "Amount", "Status", "Source", "Payment"]
EXPENSE_COLUMNS = ["Date", "Item", "Category", "Amount", "Reference"]
PROFITABILITY_COLUMNS = ["Month", "Revenue", "Expenses", "Profit", "Margin"]
ORDER_COLUMNS = ["ID", "Date", "Customer", "Status", "Source", "Total", "Items"]
INVENTORY_COLUMNS = ["Name", "Category", "Stock", "Unit", "Cost", "Value"]


def _margin_label(revenue: float, profit: float) -> str:
    return f"{profit / revenue * 100:.1f}%" if revenue > 0 else "0%"


def _items_label(order, resolver: ProductResolver) -> str:
    """'Mug (x2), Frame A (x1)'"""
    return ", ".join(
        f"{resolver.resolve_name(item)[0]} (x{item.quantity:g})"
        for item in order.line_items
    )


def build_report_sheets(
    orders: Iterable | None,
    expenses: Iterable | None,
    inventory: Iterable | None,
    start=None,
    end=None,
    catalog=None,
) -> dict[str, pd.DataFrame]:
    """
    Build the export sheets for a date range.

    Orders are filtered by orderDate, expenses by date (inclusive bounds;
    no bounds = everything). Inventory is exported as-is.

    Returns:
        {"Sales": df, "Expenses": df, "Profitability": df, "Orders": df, "Inventory": df}
        in workbook order.
    """
    stock = normalize_inventory(inventory)
    scoped_orders = filter_by_date_range(normalize_orders(orders), "order_date", start, end)
    scoped_expenses = filter_by_date_range(normalize_expenses(expenses), "date", start, end)
    resolver = ProductResolver(catalog=catalog, inventory=stock)

    sales = pd.DataFrame(
        [
            [o.id, o.order_date, o.customer_name, o.total_price, o.status, o.order_source, o.payment_status]
            for o in scoped_orders
        ],
        columns=SALES_COLUMNS,
    )

    spend = pd.DataFrame(
        [
            [e.date, e.label, e.category, e.amount, e.reference or ""]
            for e in scoped_expenses
        ],
        columns=EXPENSE_COLUMNS,
    )

    profitability = pd.DataFrame(
        [
            [m["date"], m["revenue"], m["expenses"], m["profit"], _margin_label(m["revenue"], m["profit"])]
            for m in get_monthly_financials(scoped_orders, scoped_expenses)
        ],
        columns=PROFITABILITY_COLUMNS,
    )

    order_details = pd.DataFrame(
        [
            [o.id, o.order_date, o.customer_name, o.status, o.order_source, o.total_price, _items_label(o, resolver)]
            for o in scoped_orders
        ],
        columns=ORDER_COLUMNS,
    )

    inventory_sheet = pd.DataFrame(
        [
            [i.item_name, i.category, i.current_stock, i.unit, i.unit_cost, i.stock_value]
            for i in stock
        ],
        columns=INVENTORY_COLUMNS,
    )

    return {
        "Sales": sales,
        "Expenses": spend,
        "Profitability": profitability,
        "Orders": order_details,
        "Inventory": inventory_sheet,
    }
