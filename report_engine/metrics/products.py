"""
Product Rankings — Top-selling products by quantity and by revenue.

Line items are grouped by catalog id when they have one, so a product that
was renamed between orders still lands in one row; custom products group by
their literal name.

Naming a grouped row (cross-order):
    - a placeholder ('Product 7', 'Unknown Product') is replaced by the first
      real name seen later;
    - when a later order carries a different real name, the current
      catalog / inventory name wins if one exists.
Per-line display keeps the order-time name; only the aggregate converges
on the catalog label.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from ..config import settings
from ..core.identity import ProductResolver
from ..core.records import normalize_orders

logger = logging.getLogger(__name__)

_RANK_COLUMNS = ["key", "name", "category", "quantity", "revenue"]


def _reconcile_name(row: dict, resolved, item, resolver: ProductResolver) -> None:
    if row["generic"] and not resolved.generic:
        row["name"] = resolved.name
        row["generic"] = False
    elif not resolved.generic and resolved.name != row["name"] and item.item_id is not None:
        canonical = resolver.canonical_name(item)
        if canonical:
            row["name"] = canonical
            row["generic"] = False


def aggregate_products(
    orders: Iterable,
    inventory: Iterable | None = None,
    catalog=None,
) -> pd.DataFrame:
    """
    Accumulate quantity and revenue per product across every line item.

    Returns:
        DataFrame with columns key, name, category, quantity, revenue,
        one row per group key, in first-seen order.
    """
    resolver = ProductResolver(catalog=catalog, inventory=inventory)
    stats: dict[str, dict] = {}

    for order in normalize_orders(orders):
        for item in order.line_items:
            resolved = resolver.resolve(item)
            row = stats.get(resolved.key)
            if row is None:
                row = stats[resolved.key] = {
                    "key": resolved.key,
                    "name": resolved.name,
                    "category": resolved.category,
                    "generic": resolved.generic,
                    "quantity": 0.0,
                    "revenue": 0.0,
                }
            else:
                _reconcile_name(row, resolved, item, resolver)

            row["quantity"] += item.quantity
            row["revenue"] += item.revenue

    return pd.DataFrame(list(stats.values()), columns=_RANK_COLUMNS)


def _rank(products: pd.DataFrame, by: str, limit: int) -> list[dict]:
    ranked = products.sort_values(by, ascending=False, kind="stable").head(limit)
    return [
        {
            "key": row.key,
            "name": row.name,
            "category": row.category,
            "quantity": float(row.quantity),
            "revenue": float(row.revenue),
        }
        for row in ranked.itertuples(index=False)
    ]


def get_top_selling_products(
    orders: Iterable,
    inventory: Iterable | None = None,
    catalog=None,
    limit: int | None = None,
) -> list[dict]:
    """
    Rank products by units sold.

    Args:
        orders:    Order records (structured or legacy single-item).
        inventory: Inventory items, for name / category fallback.
        catalog:   Product catalog ({'categories': [...]}), optional.
        limit:     Max rows. Defaults to settings.TOP_PRODUCTS_LIMIT (10).

    Returns:
        [
          {"key": "7", "name": "Frame A2", "category": "Frames",
           "quantity": 12.0, "revenue": 18000.0},
          ...
        ]
        Sorted by quantity descending; ties keep first-seen order.
    """
    limit = settings.TOP_PRODUCTS_LIMIT if limit is None else limit
    products = aggregate_products(orders, inventory, catalog)
    ranked = _rank(products, "quantity", limit)
    logger.debug(f"Top-selling: {len(products)} product(s), returning {len(ranked)}")
    return ranked


def get_top_revenue_products(
    orders: Iterable,
    inventory: Iterable | None = None,
    catalog=None,
    limit: int | None = None,
) -> list[dict]:
    """Same rows as get_top_selling_products(), ranked by revenue instead."""
    limit = settings.TOP_PRODUCTS_LIMIT if limit is None else limit
    return _rank(aggregate_products(orders, inventory, catalog), "revenue", limit)
