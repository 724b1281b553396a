"""Metrics computation engine."""

from .aggregator import compute_metrics
from .consistency import analyze_consistency
from .dedup import OrderDigest, deduplicate_orders
from .longevity import resolve_longevity
from .normalizer import OrderFields, extract_order_fields, tag_value
from .score import calculate_score
from .stats import compute_trade_stats
from .windows import count_rolling_windows

__all__ = [
    "OrderDigest",
    "OrderFields",
    "analyze_consistency",
    "calculate_score",
    "compute_metrics",
    "compute_trade_stats",
    "count_rolling_windows",
    "deduplicate_orders",
    "extract_order_fields",
    "resolve_longevity",
    "tag_value",
]
