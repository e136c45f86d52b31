"""
Engine configuration settings
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Report engine settings loaded from environment variables"""

    # Currency display
    CURRENCY_SYMBOL: str = "Rs."
    NUMBER_GROUPING: str = "indian"  # indian (12,34,567.89) or western (1,234,567.89)

    # Order channels
    DEFAULT_ORDER_SOURCE: str = "Ad"
    ADS_EXPENSE_CATEGORY: str = "Ads"

    # Order lifecycle labels
    PAID_STATUS: str = "Paid"
    DISPATCHED_STATUS: str = "Dispatched"
    DEFAULT_ORDER_STATUS: str = "New Order"
    EXCLUDED_ORDER_STATUSES: List[str] = ["cancelled", "returned"]

    # Ranking sizes
    TOP_PRODUCTS_LIMIT: int = 10
    TOP_EXPENSE_ITEMS_LIMIT: int = 5
    TOP_CONSUMPTION_ITEMS_LIMIT: int = 5

    class Config:
        env_file = ".env"
        env_prefix = "REPORT_ENGINE_"
        case_sensitive = True
        extra = "ignore"


NUMBER_GROUPINGS = ("indian", "western")

# Create settings instance
settings = Settings()

if settings.NUMBER_GROUPING not in NUMBER_GROUPINGS:
    raise ValueError(
        f"Unknown NUMBER_GROUPING '{settings.NUMBER_GROUPING}' "
        f"(expected one of: {', '.join(NUMBER_GROUPINGS)})"
    )
