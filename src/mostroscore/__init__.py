"""Reliability metrics for Mostro P2P trading nodes."""

from mostroscore.domain.events import RawEvent
from mostroscore.domain.models import MetricsReport
from mostroscore.metrics.aggregator import compute_metrics

__all__ = ["MetricsReport", "RawEvent", "compute_metrics"]
