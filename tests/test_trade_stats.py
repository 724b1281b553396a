from __future__ import annotations

from mostroscore.metrics.stats import compute_trade_stats


def test_empty_amounts_have_no_stats() -> None:
    stats = compute_trade_stats([])

    assert stats.has_stats is False
    assert (stats.min, stats.max, stats.mean, stats.median) == (0, 0, 0.0, 0)


def test_median_resists_outlier_while_mean_does_not() -> None:
    stats = compute_trade_stats([10, 1000, 10, 10])

    assert stats.mean == 257.5
    assert stats.median == 10
    assert stats.min == 10
    assert stats.max == 1000


def test_even_count_median_is_floored() -> None:
    stats = compute_trade_stats([3, 1, 2, 4])

    assert stats.median == 2
    assert stats.mean == 2.5


def test_odd_count_median_is_middle_value() -> None:
    stats = compute_trade_stats([900, 100, 500])

    assert stats.median == 500
    assert stats.has_stats is True


def test_single_amount() -> None:
    stats = compute_trade_stats([7])

    assert (stats.min, stats.max, stats.mean, stats.median) == (7, 7, 7.0, 7)
