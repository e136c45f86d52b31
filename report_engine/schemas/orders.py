"""
Pydantic schemas for orders and their line items
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import settings
from ..core.cleaning import normalize_id, to_number, to_text


class LineItem(BaseModel):
    """One product line of an order"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item_id: Optional[str] = Field(None, alias="itemId", description="Catalog item reference")
    category_id: Optional[str] = Field(None, alias="categoryId", description="Catalog category reference")
    custom_item_name: Optional[str] = Field(None, alias="customItemName", description="Free-text product name")
    name: Optional[str] = Field(None, description="Display name cached at order time")
    item_name: Optional[str] = Field(None, alias="itemName", description="Legacy cached display name")
    quantity: float = Field(0.0, description="Units ordered")
    unit_price: float = Field(0.0, alias="unitPrice", description="Selling price per unit")

    @field_validator("item_id", "category_id", mode="before")
    @classmethod
    def _normalize_ids(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator("custom_item_name", "name", "item_name", mode="before")
    @classmethod
    def _normalize_text(cls, v: Any) -> Optional[str]:
        text = to_text(v)
        return text if text and text.strip() else None

    @field_validator("quantity", "unit_price", mode="before")
    @classmethod
    def _coerce_numbers(cls, v: Any) -> float:
        return to_number(v)

    @property
    def cached_name(self) -> Optional[str]:
        """The name shown to the customer when the order was taken."""
        return self.name or self.item_name

    @property
    def revenue(self) -> float:
        return self.quantity * self.unit_price


class OrderRecord(BaseModel):
    """
    One sale, normalized.

    Legacy orders kept a single item in flat fields (itemId, quantity, ...)
    instead of orderItems. On validation both shapes are folded into
    ``line_items`` so aggregators only ever read one shape.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    order_date: Optional[str] = Field(None, alias="orderDate")
    created_date: Optional[str] = Field(None, alias="createdDate")
    dispatch_date: Optional[str] = Field(None, alias="dispatchDate")
    total_price: float = Field(0.0, alias="totalPrice", description="Order total (falls back to totalAmount)")
    payment_status: Optional[str] = Field(None, alias="paymentStatus")
    status: Optional[str] = None
    order_source: Optional[str] = Field(None, alias="orderSource", description="Sales channel label")
    district: Optional[str] = None
    whatsapp: Optional[str] = None
    phone: Optional[str] = None
    customer_name: Optional[str] = Field(None, alias="customerName")
    order_items: List[LineItem] = Field(default_factory=list, alias="orderItems")

    # Legacy single-item fields
    item_id: Optional[str] = Field(None, alias="itemId")
    category_id: Optional[str] = Field(None, alias="categoryId")
    item_name: Optional[str] = Field(None, alias="itemName")
    custom_item_name: Optional[str] = Field(None, alias="customItemName")
    quantity: float = 0.0
    unit_price: float = Field(0.0, alias="unitPrice")

    # Canonical items, filled in by _materialize_line_items
    line_items: List[LineItem] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _total_amount_fallback(cls, data: Any) -> Any:
        if isinstance(data, dict):
            total = data.get("totalPrice", data.get("total_price"))
            if (total is None or total == "") and data.get("totalAmount") is not None:
                data = {**data, "totalPrice": data["totalAmount"]}
                data.pop("total_price", None)
        return data

    @field_validator("id", "item_id", "category_id", mode="before")
    @classmethod
    def _normalize_ids(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator(
        "order_date", "created_date", "dispatch_date", "payment_status", "status",
        "order_source", "district", "whatsapp", "phone", "customer_name",
        "item_name", "custom_item_name",
        mode="before",
    )
    @classmethod
    def _normalize_text(cls, v: Any) -> Optional[str]:
        return to_text(v)

    @field_validator("total_price", "quantity", "unit_price", mode="before")
    @classmethod
    def _coerce_numbers(cls, v: Any) -> float:
        return to_number(v)

    @field_validator("order_items", mode="before")
    @classmethod
    def _keep_item_shaped_entries(cls, v: Any) -> list:
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, LineItem))]

    @model_validator(mode="after")
    def _materialize_line_items(self) -> "OrderRecord":
        if self.order_items:
            self.line_items = list(self.order_items)
        elif self.item_id or self.custom_item_name or self.item_name:
            self.line_items = [
                LineItem(
                    item_id=self.item_id,
                    category_id=self.category_id,
                    item_name=self.item_name,
                    custom_item_name=self.custom_item_name,
                    quantity=self.quantity or 1,
                    unit_price=self.unit_price,
                )
            ]
        else:
            self.line_items = []
        return self

    @property
    def is_paid(self) -> bool:
        return self.payment_status == settings.PAID_STATUS

    @property
    def is_valid(self) -> bool:
        """False for cancelled / returned orders."""
        status = (self.status or "").strip().lower()
        return status not in settings.EXCLUDED_ORDER_STATUSES

    @property
    def effective_date(self) -> Optional[str]:
        return self.order_date or self.created_date
