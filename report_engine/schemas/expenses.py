"""
Pydantic schemas for expense records
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.cleaning import normalize_id, to_number, to_text


class ExpenseRecord(BaseModel):
    """One business expense"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    date: Optional[str] = None
    amount: float = Field(0.0, description="Amount spent (falls back to total)")
    category: Optional[str] = Field(None, description="Free text; 'Ads' marks channel ad spend")
    item: Optional[str] = Field(None, description="What was bought; for ads, the channel name")
    description: Optional[str] = None
    reference: Optional[str] = None
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")

    @model_validator(mode="before")
    @classmethod
    def _total_fallback(cls, data: Any) -> Any:
        if isinstance(data, dict):
            amount = data.get("amount")
            if (amount is None or amount == "" or amount == 0) and data.get("total") is not None:
                data = {**data, "amount": data["total"]}
        return data

    @field_validator("id", "inventory_item_id", mode="before")
    @classmethod
    def _normalize_ids(cls, v: Any) -> Optional[str]:
        return normalize_id(v)

    @field_validator("date", "category", "item", "description", "reference", mode="before")
    @classmethod
    def _normalize_text(cls, v: Any) -> Optional[str]:
        return to_text(v)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v: Any) -> float:
        return to_number(v)

    @property
    def label(self) -> Optional[str]:
        """Item name, or the description for records saved before items existed."""
        return self.item or self.description
