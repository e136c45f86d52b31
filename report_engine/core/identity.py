"""
Product Resolver — Display name, category and grouping key for a line item.

Products get renamed, deleted from the catalog after being sold, or never
existed in it (custom, free-text products). Both catalog-keyed and custom
products must show up in reports with a sensible label, and the same
catalog product must aggregate into one row however it was labelled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..schemas import InventoryItem, LineItem, ProductCatalog
from .records import normalize_catalog, normalize_inventory

logger = logging.getLogger(__name__)

UNKNOWN_PRODUCT = "Unknown Product"
UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class ResolvedProduct:
    name: str
    category: str
    key: str
    generic: bool = False   # placeholder name, never authoritative


class ProductResolver:
    """
    Resolves line items against the catalog and inventory.

    Name resolution order (first match wins):
        1. Name cached on the line item at order time (name / itemName)
        2. customItemName
        3. Catalog item — within categoryId first, then every category
        4. Inventory item name by itemId
        5. 'Product <itemId>'   (generic)
        6. 'Unknown Product'    (generic)

    Category resolution order:
        catalog category name → inventory category → categoryId with its
        first letter upper-cased → 'Uncategorized'

    Lookup indexes are built once per resolver; ids are compared as strings.
    """

    def __init__(self, catalog=None, inventory: Iterable | None = None):
        catalog = normalize_catalog(catalog)

        self._category_names: dict[str, str] = {}
        self._items_by_category: dict[tuple[str, str], str] = {}
        self._items_anywhere: dict[str, str] = {}
        for category in catalog.categories:
            if category.id is not None and category.id not in self._category_names and category.name:
                self._category_names[category.id] = category.name
            for item in category.items:
                if item.id is None or not item.name:
                    continue
                self._items_by_category.setdefault((category.id, item.id), item.name)
                self._items_anywhere.setdefault(item.id, item.name)

        self._inventory: dict[str, InventoryItem] = {}
        for entry in normalize_inventory(inventory):
            if entry.id is not None:
                self._inventory.setdefault(entry.id, entry)

    # ----------------------------------------------------------------
    # Lookups
    # ----------------------------------------------------------------

    def category_name(self, category_id: str | None) -> str | None:
        if category_id is None:
            return None
        return self._category_names.get(category_id)

    def catalog_name(self, category_id: str | None, item_id: str | None) -> str | None:
        """Catalog name for *item_id*, trying its own category before a global scan."""
        if item_id is None:
            return None
        if category_id is not None:
            name = self._items_by_category.get((category_id, item_id))
            if name:
                return name
        return self._items_anywhere.get(item_id)

    def inventory_item(self, item_id: str | None) -> InventoryItem | None:
        if item_id is None:
            return None
        return self._inventory.get(item_id)

    def canonical_name(self, item: LineItem) -> str | None:
        """Current catalog name, else inventory name. Ignores order-time snapshots."""
        name = self.catalog_name(item.category_id, item.item_id)
        if name:
            return name
        entry = self.inventory_item(item.item_id)
        if entry is not None and entry.item_name and entry.item_name.strip():
            return entry.item_name
        return None

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    def resolve_name(self, item: LineItem) -> tuple[str, bool]:
        """Return (name, generic) for a line item."""
        if item.cached_name:
            return item.cached_name, False
        if item.custom_item_name:
            return item.custom_item_name, False

        canonical = self.canonical_name(item)
        if canonical:
            return canonical, False

        if item.item_id is not None:
            return f"Product {item.item_id}", True
        return UNKNOWN_PRODUCT, True

    def resolve_category(self, item: LineItem) -> str:
        name = self.category_name(item.category_id)
        if name:
            return name

        entry = self.inventory_item(item.item_id)
        if entry is not None and entry.category and entry.category.strip():
            return entry.category

        if item.category_id:
            return item.category_id[0].upper() + item.category_id[1:]
        return UNCATEGORIZED

    def resolve(self, item: LineItem) -> ResolvedProduct:
        name, generic = self.resolve_name(item)
        if generic:
            logger.debug(f"No name found for item {item.item_id!r}; using '{name}'")
        return ResolvedProduct(
            name=name,
            category=self.resolve_category(item),
            key=item.item_id if item.item_id is not None else name,
            generic=generic,
        )
