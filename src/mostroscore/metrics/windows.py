"""Trailing window trade counts."""

from __future__ import annotations

from collections.abc import Iterable

from mostroscore.domain.models import SECONDS_PER_DAY, RollingWindows

WINDOW_DAYS = (7, 30, 90)


def count_since(timestamps: Iterable[int], cutoff: float) -> int:
    """Count timestamps at or after `cutoff`."""
    return sum(1 for ts in timestamps if ts >= cutoff)


def count_rolling_windows(timestamps: Iterable[int], now: int) -> RollingWindows:
    """Count successful trades in the last 7, 30 and 90 days.

    Lower bounds are inclusive and there is no upper bound, so trades stamped
    at or after `now` count in every window.
    """
    values = list(timestamps)
    last_7d, last_30d, last_90d = (
        count_since(values, now - days * SECONDS_PER_DAY) for days in WINDOW_DAYS
    )
    return RollingWindows(last_7d=last_7d, last_30d=last_30d, last_90d=last_90d)
