"""Domain models and event types."""

from .events import ANCHOR_EVENT_KIND, ORDER_EVENT_KIND, RawEvent
from .models import (
    SECONDS_PER_DAY,
    SUCCESS_STATUS,
    ActivityConsistency,
    CanonicalOrder,
    Longevity,
    MetricsReport,
    RollingWindows,
    TradeStats,
)

__all__ = [
    "ANCHOR_EVENT_KIND",
    "ORDER_EVENT_KIND",
    "SECONDS_PER_DAY",
    "SUCCESS_STATUS",
    "ActivityConsistency",
    "CanonicalOrder",
    "Longevity",
    "MetricsReport",
    "RawEvent",
    "RollingWindows",
    "TradeStats",
]
