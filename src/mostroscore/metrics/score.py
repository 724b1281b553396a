"""Composite trust score."""

from __future__ import annotations

import math

SATS_PER_BTC = 100_000_000

AGE_POINTS = 30
VOLUME_POINTS = 40
TRADE_POINTS = 30

AGE_TARGET_DAYS = 365
VOLUME_TARGET_BTC = 1
TRADE_TARGET_COUNT = 100


def _capped_ratio(value: float, target: float) -> float:
    return min(1.0, max(0.0, value / target))


def calculate_score(days_active: float, volume_sats: int, successful_trades: int) -> int:
    """Combine age, volume and trade count into an integer in [0, 100].

    Age is worth 30 points at one year, volume 40 points at one BTC and trade
    count 30 points at 100 trades. The floor is taken once, on the sum.
    """
    score = _capped_ratio(days_active, AGE_TARGET_DAYS) * AGE_POINTS
    score += _capped_ratio(volume_sats / SATS_PER_BTC, VOLUME_TARGET_BTC) * VOLUME_POINTS
    score += _capped_ratio(successful_trades, TRADE_TARGET_COUNT) * TRADE_POINTS
    return math.floor(score)
