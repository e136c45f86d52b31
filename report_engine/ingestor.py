"""
Report Ingestor — Normalizes raw storage collections once per report run.

Storage hands over orders in two shapes (structured orderItems and legacy
flat single-item records), numbers as strings and ids as ints or strings.
The ingestor validates every collection into schema objects up front so
each metric module works on the same, already-normalized records.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .core.records import normalize_catalog, normalize_expenses, normalize_inventory, normalize_orders
from .schemas import ExpenseRecord, InventoryItem, OrderRecord, ProductCatalog

logger = logging.getLogger(__name__)


class ReportIngestor:
    """
    Validates orders, expenses, inventory and the product catalog.

    Records that cannot be read are skipped (and logged), never raised;
    how many were dropped per collection is kept in ``skipped``.
    """

    def __init__(self):
        self._orders: list[OrderRecord] = []
        self._expenses: list[ExpenseRecord] = []
        self._inventory: list[InventoryItem] = []
        self._catalog: ProductCatalog = ProductCatalog()
        self._skipped: dict[str, int] = {"orders": 0, "expenses": 0, "inventory": 0}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def ingest(
        self,
        orders: Iterable | None = None,
        expenses: Iterable | None = None,
        inventory: Iterable | None = None,
        catalog=None,
    ) -> "ReportIngestor":
        """
        Normalize every collection.

        Returns:
            self, so callers can chain: ReportIngestor().ingest(...).orders
        """
        raw_orders = list(orders or ())
        raw_expenses = list(expenses or ())
        raw_inventory = list(inventory or ())

        self._orders = normalize_orders(raw_orders)
        self._expenses = normalize_expenses(raw_expenses)
        self._inventory = normalize_inventory(raw_inventory)
        self._catalog = normalize_catalog(catalog)

        self._skipped = {
            "orders": len(raw_orders) - len(self._orders),
            "expenses": len(raw_expenses) - len(self._expenses),
            "inventory": len(raw_inventory) - len(self._inventory),
        }

        logger.info(
            f"Ingested {len(self._orders)} orders, {len(self._expenses)} expenses, "
            f"{len(self._inventory)} inventory items, "
            f"{len(self._catalog.categories)} catalog categories"
        )
        return self

    @property
    def orders(self) -> list[OrderRecord]:
        return self._orders

    @property
    def expenses(self) -> list[ExpenseRecord]:
        return self._expenses

    @property
    def inventory(self) -> list[InventoryItem]:
        return self._inventory

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    @property
    def skipped(self) -> dict[str, int]:
        return dict(self._skipped)
