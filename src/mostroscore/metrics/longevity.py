"""Resolve when a node started trading."""

from __future__ import annotations

from collections.abc import Iterable

from mostroscore.domain.events import RawEvent
from mostroscore.domain.models import SECONDS_PER_DAY, Longevity


def resolve_longevity(
    anchor_events: Iterable[RawEvent],
    first_order_at: int | None,
    last_order_at: int | None,
    now: int,
) -> Longevity:
    """Derive days active from the earliest anchor, else from the order span.

    Without anchors the figure is only the span between the first and last
    order event, and `has_anchor_events` is false so callers can say so.
    """
    first_activity = min((event.created_at for event in anchor_events), default=None)
    if first_activity is not None:
        days_active = (now - first_activity) / SECONDS_PER_DAY
    elif first_order_at is not None and last_order_at is not None:
        days_active = (last_order_at - first_order_at) / SECONDS_PER_DAY
    else:
        days_active = 0.0
    return Longevity(
        first_activity=first_activity,
        days_active=max(0.0, float(days_active)),
        has_anchor_events=first_activity is not None,
    )
