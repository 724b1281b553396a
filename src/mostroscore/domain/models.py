"""Core metrics domain models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .events import ORDER_EVENT_KIND, RawEvent

SECONDS_PER_DAY = 86400
SUCCESS_STATUS = "success"


@dataclass(frozen=True)
class CanonicalOrder:
    """Final state of one order id after deduplication."""

    order_id: str
    created_at: int
    status: str | None
    amount_sats: int | None
    event_id: str = ""

    @property
    def is_successful(self) -> bool:
        return self.status == SUCCESS_STATUS

    def to_event(self, pubkey: str = "") -> RawEvent:
        """Rebuild an order event carrying this record's final state."""
        tags: list[tuple[str, ...]] = [("z", "order"), ("d", self.order_id)]
        if self.status is not None:
            tags.append(("s", self.status))
        if self.amount_sats is not None:
            tags.append(("amt", str(self.amount_sats)))
        return RawEvent(
            id=self.event_id,
            kind=ORDER_EVENT_KIND,
            pubkey=pubkey,
            created_at=self.created_at,
            tags=tuple(tags),
        )


@dataclass(frozen=True)
class Longevity:
    """When the node started trading and for how long."""

    first_activity: int | None
    days_active: float
    has_anchor_events: bool


@dataclass(frozen=True)
class TradeStats:
    """Distribution of successful trade amounts in sats."""

    min: int = 0
    max: int = 0
    mean: float = 0.0
    median: int = 0
    has_stats: bool = False


@dataclass(frozen=True)
class RollingWindows:
    """Successful trades inside trailing windows anchored at now."""

    last_7d: int = 0
    last_30d: int = 0
    last_90d: int = 0


@dataclass(frozen=True)
class ActivityConsistency:
    """Distinct active days and longest inactivity gap over the last 30 days."""

    active_days: int = 0
    max_gap: int = 30


@dataclass(frozen=True)
class MetricsReport:
    """Immutable snapshot of every metric for one node."""

    # Longevity
    first_activity: int | None
    days_active: float
    has_anchor_events: bool

    # Liveness
    last_order_at: int | None
    days_since_last: int

    # Recent activity
    trades_7d: int
    trades_30d: int
    trades_90d: int

    # Activity consistency
    active_days_30d: int
    max_inactive_gap: int

    # Cumulative performance
    successful_trades: int
    total_volume_sats: int

    # Trade statistics
    min_trade: int
    max_trade: int
    mean_trade: float
    median_trade: int
    has_trade_stats: bool

    trust_score: int

    # Diagnostics
    total_order_events: int
    unique_orders: int
    anchor_event_count: int
    computed_at: int

    def to_record(self) -> dict[str, Any]:
        """Convert report to serializable dict."""
        return asdict(self)
