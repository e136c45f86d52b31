"""
Pydantic schemas for inventory items and the product catalog
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.cleaning import normalize_id, to_number, to_text


class InventoryItem(BaseModel):
    """One stocked material or product"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    item_name: Optional[str] = Field(None, alias="itemName")
    category: Optional[str] = None
    current_stock: float = Field(0.0, alias="currentStock")
    reorder_level: float = Field(0.0, alias="reorderLevel", description="0 means no threshold configured")
    unit_cost: float = Field(0.0, alias="unitCost")
    unit: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator("item_name", "category", "unit", mode="before")
    @classmethod
    def _normalize_text(cls, v: Any) -> Optional[str]:
        return to_text(v)

    @field_validator("current_stock", "reorder_level", "unit_cost", mode="before")
    @classmethod
    def _coerce_numbers(cls, v: Any) -> float:
        return to_number(v)

    @property
    def stock_value(self) -> float:
        return self.current_stock * self.unit_cost


class CatalogItem(BaseModel):
    """A sellable product in the catalog"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    price: float = 0.0

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, v: Any) -> Optional[str]:
        text = to_text(v)
        return text if text and text.strip() else None

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, v: Any) -> float:
        return to_number(v)


class CatalogCategory(BaseModel):
    """A catalog category and its products"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    items: List[CatalogItem] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, v: Any) -> Optional[str]:
        return to_text(v)

    @field_validator("items", mode="before")
    @classmethod
    def _keep_item_shaped_entries(cls, v: Any) -> list:
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, CatalogItem))]


class ProductCatalog(BaseModel):
    """Read-only reference data used for product name / category resolution"""

    model_config = ConfigDict(extra="ignore")

    categories: List[CatalogCategory] = Field(default_factory=list)

    @field_validator("categories", mode="before")
    @classmethod
    def _keep_category_shaped_entries(cls, v: Any) -> list:
        if not isinstance(v, (list, tuple)):
            return []
        return [cat for cat in v if isinstance(cat, (dict, CatalogCategory))]
