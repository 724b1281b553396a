"""Assemble the full metrics report from an event snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from mostroscore.domain.events import RawEvent
from mostroscore.domain.models import SECONDS_PER_DAY, MetricsReport
from mostroscore.metrics.consistency import analyze_consistency
from mostroscore.metrics.dedup import deduplicate_orders
from mostroscore.metrics.longevity import resolve_longevity
from mostroscore.metrics.score import calculate_score
from mostroscore.metrics.stats import compute_trade_stats
from mostroscore.metrics.windows import count_rolling_windows


def compute_metrics(
    anchor_events: Sequence[RawEvent],
    order_events: Sequence[RawEvent],
    now: int,
) -> MetricsReport:
    """Recompute every metric from scratch for the given snapshot and time.

    Pure: same events and same `now` always give an equal report.
    """
    digest = deduplicate_orders(order_events)

    successful_trades = 0
    total_volume_sats = 0
    trade_amounts: list[int] = []
    trade_timestamps: list[int] = []
    for order in digest.orders.values():
        if not order.is_successful:
            continue
        successful_trades += 1
        trade_timestamps.append(order.created_at)
        if order.amount_sats is not None:
            total_volume_sats += order.amount_sats
            trade_amounts.append(order.amount_sats)

    longevity = resolve_longevity(
        anchor_events,
        first_order_at=digest.first_order_at,
        last_order_at=digest.last_order_at,
        now=now,
    )
    stats = compute_trade_stats(trade_amounts)
    windows = count_rolling_windows(trade_timestamps, now)
    consistency = analyze_consistency(trade_timestamps, now)

    if digest.last_order_at is None:
        days_since_last = 0
    else:
        days_since_last = max(0, int((now - digest.last_order_at) // SECONDS_PER_DAY))

    return MetricsReport(
        first_activity=longevity.first_activity,
        days_active=longevity.days_active,
        has_anchor_events=longevity.has_anchor_events,
        last_order_at=digest.last_order_at,
        days_since_last=days_since_last,
        trades_7d=windows.last_7d,
        trades_30d=windows.last_30d,
        trades_90d=windows.last_90d,
        active_days_30d=consistency.active_days,
        max_inactive_gap=consistency.max_gap,
        successful_trades=successful_trades,
        total_volume_sats=total_volume_sats,
        min_trade=stats.min,
        max_trade=stats.max,
        mean_trade=stats.mean,
        median_trade=stats.median,
        has_trade_stats=stats.has_stats,
        trust_score=calculate_score(longevity.days_active, total_volume_sats, successful_trades),
        total_order_events=digest.total_events,
        unique_orders=len(digest.orders),
        anchor_event_count=len(anchor_events),
        computed_at=now,
    )
