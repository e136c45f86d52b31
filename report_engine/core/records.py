"""
Records — Boundary normalization and DataFrame builders.

Every aggregator accepts raw storage records (camelCase dicts) or already
validated schema objects. normalize_*() turns either into schema objects
exactly once; the *_frame() builders lay them out as typed DataFrames with
the derived columns the metrics modules group on.

Malformed records never raise: anything that is not a mapping, or that
still fails validation, is skipped with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterable, Type, TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from ..config import settings
from ..schemas import ExpenseRecord, InventoryItem, OrderRecord, ProductCatalog
from .channels import channel_name
from .cleaning import digits_only
from .dates import month_key

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


# ------------------------------------------------------------------
# Normalization
# ------------------------------------------------------------------

def _normalize(records: Iterable | None, model: Type[ModelT], entity: str) -> list[ModelT]:
    normalized: list[ModelT] = []
    skipped = 0

    for position, record in enumerate(records or ()):
        if isinstance(record, model):
            normalized.append(record)
            continue
        if not isinstance(record, Mapping):
            skipped += 1
            logger.warning(f"Skipping {entity} #{position}: expected a mapping, got {type(record).__name__}")
            continue
        try:
            normalized.append(model.model_validate(dict(record)))
        except ValidationError as exc:
            skipped += 1
            logger.warning(f"Skipping {entity} #{position} ({record.get('id')}): {exc.error_count()} invalid field(s)")

    if skipped:
        logger.warning(f"Normalized {len(normalized)} {entity} record(s), skipped {skipped}")
    return normalized


def normalize_orders(orders: Iterable | None) -> list[OrderRecord]:
    return _normalize(orders, OrderRecord, "order")


def normalize_expenses(expenses: Iterable | None) -> list[ExpenseRecord]:
    return _normalize(expenses, ExpenseRecord, "expense")


def normalize_inventory(inventory: Iterable | None) -> list[InventoryItem]:
    return _normalize(inventory, InventoryItem, "inventory item")


def normalize_catalog(catalog) -> ProductCatalog:
    """Accept None, a ProductCatalog, or a {'categories': [...]} mapping."""
    if isinstance(catalog, ProductCatalog):
        return catalog
    if not isinstance(catalog, Mapping):
        if catalog is not None:
            logger.warning(f"Ignoring product catalog of type {type(catalog).__name__}")
        return ProductCatalog()
    try:
        return ProductCatalog.model_validate(dict(catalog))
    except ValidationError as exc:
        logger.warning(f"Ignoring product catalog: {exc.error_count()} invalid field(s)")
        return ProductCatalog()


# ------------------------------------------------------------------
# Derived order fields
# ------------------------------------------------------------------

def customer_key(order: OrderRecord) -> str | None:
    """WhatsApp digits, else phone digits, else the customer name."""
    name = (order.customer_name or "").strip()
    return digits_only(order.whatsapp) or digits_only(order.phone) or name or None


# ------------------------------------------------------------------
# Frame builders
# ------------------------------------------------------------------

ORDER_COLUMNS = {
    "order_id": object,
    "source": object,
    "status": object,
    "total_price": float,
    "is_paid": bool,
    "is_valid": bool,
    "month": object,
    "district": object,
    "customer_key": object,
    "created_date": object,
    "dispatch_date": object,
}

LINE_ITEM_COLUMNS = {
    "order_pos": int,
    "source": object,
    "is_paid": bool,
    "is_valid": bool,
    "month": object,
    "item_id": object,
    "quantity": float,
    "unit_price": float,
    "revenue": float,
}

EXPENSE_COLUMNS = {
    "expense_id": object,
    "month": object,
    "amount": float,
    "category": object,
    "label": object,
    "is_ads": bool,
    "ads_target": object,
}

INVENTORY_COLUMNS = {
    "item_id": object,
    "name": object,
    "category": object,
    "current_stock": float,
    "reorder_level": float,
    "unit_cost": float,
}


def _typed_frame(rows: list[dict], columns: dict) -> pd.DataFrame:
    """Build a frame whose columns and dtypes exist even when *rows* is empty."""
    return pd.DataFrame(rows, columns=list(columns)).astype(columns)


def orders_frame(orders: Iterable | None) -> pd.DataFrame:
    """One row per order with channel, paid/valid flags and month bucket."""
    rows = [
        {
            "order_id": order.id,
            "source": channel_name(order.order_source),
            "status": order.status,
            "total_price": order.total_price,
            "is_paid": order.is_paid,
            "is_valid": order.is_valid,
            "month": month_key(order.effective_date),
            "district": (order.district or "").strip() or None,
            "customer_key": customer_key(order),
            "created_date": order.created_date,
            "dispatch_date": order.dispatch_date,
        }
        for order in normalize_orders(orders)
    ]
    return _typed_frame(rows, ORDER_COLUMNS)


def line_items_frame(orders: Iterable | None) -> pd.DataFrame:
    """One row per canonical line item, carrying its order's channel and flags."""
    rows = []
    for position, order in enumerate(normalize_orders(orders)):
        source = channel_name(order.order_source)
        month = month_key(order.effective_date)
        for item in order.line_items:
            rows.append({
                "order_pos": position,
                "source": source,
                "is_paid": order.is_paid,
                "is_valid": order.is_valid,
                "month": month,
                "item_id": item.item_id,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
                "revenue": item.revenue,
            })
    return _typed_frame(rows, LINE_ITEM_COLUMNS)


def expenses_frame(expenses: Iterable | None) -> pd.DataFrame:
    """One row per expense with display labels and the ad-spend match target."""
    rows = []
    for expense in normalize_expenses(expenses):
        rows.append({
            "expense_id": expense.id,
            "month": month_key(expense.date),
            "amount": expense.amount,
            "category": (expense.category or "Other").strip(),
            "label": (expense.label or "Unnamed").strip(),
            "is_ads": expense.category == settings.ADS_EXPENSE_CATEGORY,
            "ads_target": (expense.label or "").strip().lower(),
        })
    return _typed_frame(rows, EXPENSE_COLUMNS)


def inventory_frame(inventory: Iterable | None) -> pd.DataFrame:
    """One row per inventory item."""
    rows = [
        {
            "item_id": item.id,
            "name": item.item_name,
            "category": item.category,
            "current_stock": item.current_stock,
            "reorder_level": item.reorder_level,
            "unit_cost": item.unit_cost,
        }
        for item in normalize_inventory(inventory)
    ]
    return _typed_frame(rows, INVENTORY_COLUMNS)
