from __future__ import annotations

from mostroscore.metrics.score import calculate_score


def test_full_marks_at_targets() -> None:
    assert calculate_score(365, 100_000_000, 100) == 100


def test_zero_inputs_score_zero() -> None:
    assert calculate_score(0, 0, 0) == 0


def test_contributions_are_capped() -> None:
    assert calculate_score(10_000, 50 * 100_000_000, 5_000) == 100
    assert calculate_score(730, 0, 0) == 30
    assert calculate_score(0, 300_000_000, 0) == 40
    assert calculate_score(0, 0, 250) == 30


def test_floor_applies_to_the_sum() -> None:
    # 0.5 + 0.6 + 0.3 = 1.4 points, floored once to 1.
    score = calculate_score(365 / 60, 1_500_000, 1)

    assert score == 1


def test_partial_contributions_are_linear() -> None:
    # 15 + 20 + 15 = 50
    assert calculate_score(182.5, 50_000_000, 50) == 50


def test_score_stays_in_bounds() -> None:
    for days in (0, 1.5, 90, 365, 5000):
        for volume in (0, 1, 20_000, 100_000_000, 10**12):
            for trades in (0, 1, 99, 100, 10**6):
                assert 0 <= calculate_score(days, volume, trades) <= 100


def test_negative_inputs_do_not_go_below_zero() -> None:
    assert calculate_score(-30, -5, -1) == 0
