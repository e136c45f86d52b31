"""
Channels — Order-source naming and ad-spend attribution.

An order's channel is its free-text orderSource. Ad spend is logged as an
expense in the 'Ads' category whose item (or description) names the
channel, e.g. {category: 'Ads', item: 'Facebook'}.
"""

from __future__ import annotations

import pandas as pd

from ..config import settings


def channel_name(order_source) -> str:
    """Trimmed orderSource, defaulting to settings.DEFAULT_ORDER_SOURCE."""
    text = order_source if isinstance(order_source, str) else None
    return (text or settings.DEFAULT_ORDER_SOURCE).strip()


def attribute_ad_spend(channels: pd.Index, expenses: pd.DataFrame) -> pd.Series:
    """
    Sum ad expenses onto the channels they name.

    Matching is case-insensitive on the trimmed item/description text.
    Ad expenses naming no known channel are dropped here; they still count
    in expense totals.

    Args:
        channels: Channel names, in report order.
        expenses: Output of core.records.expenses_frame().

    Returns:
        Float Series indexed like *channels* (0.0 where nothing matched).
    """
    ads = expenses[expenses["is_ads"]]
    spend_by_target = ads.groupby("ads_target", sort=False)["amount"].sum()

    lowered = pd.Series(channels, index=channels, dtype=object).str.lower()
    return lowered.map(spend_by_target).fillna(0.0).astype(float)
