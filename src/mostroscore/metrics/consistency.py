"""Activity consistency over the trailing 30 days."""

from __future__ import annotations

from collections.abc import Iterable

from mostroscore.domain.models import SECONDS_PER_DAY, ActivityConsistency

CONSISTENCY_WINDOW_DAYS = 30


def day_bucket(ts: float) -> int:
    """Return the UTC calendar day index of a unix timestamp."""
    return int(ts // SECONDS_PER_DAY)


def analyze_consistency(timestamps: Iterable[int], now: int) -> ActivityConsistency:
    """Count distinct active days and the longest run of idle days.

    The walk starts at the first day of the window and ends at today, so a
    dry spell that is still ongoing counts as a gap.
    """
    window_start = now - CONSISTENCY_WINDOW_DAYS * SECONDS_PER_DAY
    active_days = sorted({day_bucket(ts) for ts in timestamps if ts >= window_start})
    if not active_days:
        return ActivityConsistency(active_days=0, max_gap=CONSISTENCY_WINDOW_DAYS)

    max_gap = 0
    previous_day = day_bucket(window_start)
    for day in active_days:
        max_gap = max(max_gap, day - previous_day - 1)
        previous_day = day

    today = day_bucket(now)
    max_gap = max(max_gap, today - previous_day)
    return ActivityConsistency(active_days=len(active_days), max_gap=max_gap)
