"""
Event type constants and analytics bucket configuration
"""

from enum import Enum
from typing import Dict, Any, Mapping, Optional

class EventType(str, Enum):
    SHOP_VIEW = "shop_view"
    PRODUCT_VIEW = "product_view"
    WHATSAPP = "whatsapp"
    AR_VIEW = "ar_view"

class AnalyticsConfig:
    """Fixed analytics buckets and their source event types"""

    VISITORS = {
        "name": "Visitors",
        "type": EventType.SHOP_VIEW,
        "description": "Shop page views",
    }

    PRODUCT_VIEWS = {
        "name": "Product Views",
        "type": EventType.PRODUCT_VIEW,
        "description": "Product detail page views",
    }

    WHATSAPP = {
        "name": "WhatsApp Clicks",
        "type": EventType.WHATSAPP,
        "description": "Purchase intents sent to WhatsApp",
    }

    AR_VIEWS = {
        "name": "AR Views",
        "type": EventType.AR_VIEW,
        "description": "Products opened in the AR viewer",
    }

# Response field -> bucket config, in response order
ANALYTICS_BUCKETS = {
    "visitors": AnalyticsConfig.VISITORS,
    "product_views": AnalyticsConfig.PRODUCT_VIEWS,
    "whatsapp": AnalyticsConfig.WHATSAPP,
    "ar_views": AnalyticsConfig.AR_VIEWS,
}

ANALYTICS_RANGES = (7, 15, 30, 365)  # days
DEFAULT_RANGE = 7

def resolve_range(value: Optional[str]) -> int:
    """Map a range query value to a lookback in days; anything unknown is the default"""
    try:
        days = int(value)
    except (TypeError, ValueError):
        return DEFAULT_RANGE
    return days if days in ANALYTICS_RANGES else DEFAULT_RANGE

def build_summary(counts: Mapping[str, int]) -> Dict[str, int]:
    """Fold per-type counts into the four buckets; missing types count as zero"""
    return {
        field: int(counts.get(config["type"].value, 0))
        for field, config in ANALYTICS_BUCKETS.items()
    }

def get_all_bucket_configs() -> Dict[str, Dict[str, Any]]:
    """Get all analytics bucket configurations"""
    return {
        field: {**config, "type": config["type"].value}
        for field, config in ANALYTICS_BUCKETS.items()
    }
