"""
Pydantic schemas for the records the storage layer hands to the engine
"""

from .orders import LineItem, OrderRecord
from .expenses import ExpenseRecord
from .inventory import InventoryItem, CatalogItem, CatalogCategory, ProductCatalog

__all__ = [
    # Order schemas
    "LineItem", "OrderRecord",
    # Expense schemas
    "ExpenseRecord",
    # Inventory & catalog schemas
    "InventoryItem", "CatalogItem", "CatalogCategory", "ProductCatalog",
]
