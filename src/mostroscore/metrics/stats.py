"""Trade amount statistics."""

from __future__ import annotations

from collections.abc import Sequence

from mostroscore.domain.models import TradeStats


def compute_trade_stats(amounts: Sequence[int]) -> TradeStats:
    """Compute min, max, mean and median of successful trade amounts.

    The mean is left unrounded. An even-length median is the floor of the two
    middle values' average, so it stays an integer amount of sats.
    """
    if not amounts:
        return TradeStats()

    ordered = sorted(amounts)
    count = len(ordered)
    middle = count // 2
    if count % 2 == 0:
        median = (ordered[middle - 1] + ordered[middle]) // 2
    else:
        median = ordered[middle]

    return TradeStats(
        min=ordered[0],
        max=ordered[-1],
        mean=sum(ordered) / count,
        median=median,
        has_stats=True,
    )
