"""
Tests for the health bar HP estimator.
"""

import pytest
from combat_odds.core import error_handling
from combat_odds.combat.health_bar import (
    HealthObservation,
    HpRange,
    estimate_hp_after_hit,
    estimate_hp_before_hit,
    health_bar_hp_range,
)
from combat_odds.core.constants import HP_UNAVAILABLE


def test_empty_bar_means_zero_hp():
    assert estimate_hp_before_hit(0, 30, 99, 0) == 0
    assert health_bar_hp_range(0, 30, 99) == HpRange(lower=0, upper=0)


def test_empty_bar_adds_back_damage():
    """
    Test that the damage of the killing hit is added back to an empty bar.
    """
    assert estimate_hp_before_hit(0, 30, 99, 12) == 12


def test_single_segment_bar_uses_whole_hp_range():
    """
    Test that a scale of one spans every HP value from 1 to max HP.
    """
    assert health_bar_hp_range(1, 1, 99) == HpRange(lower=1, upper=99)
    # Midpoint of [1, 99] is 50, plus the 10 damage dealt.
    assert estimate_hp_before_hit(1, 1, 99, 10) == 60


def test_half_bar_range():
    """
    Test the bucket bounds of a half-full bar.
    """
    hp_range = health_bar_hp_range(15, 30, 99)
    assert hp_range == HpRange(lower=48, upper=51)
    assert hp_range.midpoint == 50
    assert estimate_hp_before_hit(15, 30, 99, 20) == 70


def test_lowest_non_empty_segment():
    hp_range = health_bar_hp_range(1, 30, 99)
    assert hp_range == HpRange(lower=1, upper=3)
    assert estimate_hp_after_hit(1, 30, 99) == 2


def test_full_bar_is_capped_at_max_hp():
    hp_range = health_bar_hp_range(30, 30, 99)
    assert hp_range.upper == 99
    assert estimate_hp_after_hit(30, 30, 99) == 99


@pytest.mark.parametrize(
    "ratio, scale, max_hp",
    [
        (-1, 30, 99),
        (5, 0, 99),
        (5, -30, 99),
        (5, 30, 0),
        (5, 30, -99),
    ],
)
def test_invalid_readings_are_unavailable(ratio, scale, max_hp):
    """
    Test that readings that cannot be inverted return the sentinel.
    """
    assert health_bar_hp_range(ratio, scale, max_hp) is None
    assert estimate_hp_after_hit(ratio, scale, max_hp) == HP_UNAVAILABLE
    assert estimate_hp_before_hit(ratio, scale, max_hp, 25) == HP_UNAVAILABLE
    assert not HealthObservation(ratio=ratio, scale=scale, max_hp=max_hp).is_valid


def test_ranges_cover_every_hp_value():
    """
    Test that the non-empty buckets of a bar tile the whole HP range.
    """
    max_hp, scale = 99, 30
    covered = set()
    for ratio in range(1, scale + 1):
        hp_range = health_bar_hp_range(ratio, scale, max_hp)
        assert hp_range.lower <= hp_range.upper
        covered.update(range(hp_range.lower, hp_range.upper + 1))
    assert covered == set(range(1, max_hp + 1))


def test_midpoint_rounds_up():
    assert HpRange(lower=4, upper=7).midpoint == 6
    assert HpRange(lower=4, upper=8).midpoint == 6


@pytest.mark.parametrize(
    "ratio, scale, max_hp",
    [
        (1.5, 30, 99),
        (None, 30, 99),
        (15, "30", 99),
        (15, 30, float("inf")),
    ],
)
def test_non_integer_readings_are_unavailable(mocker, ratio, scale, max_hp):
    """
    Test that readings that are not whole numbers return the sentinel.
    """
    mock_warning = mocker.patch.object(error_handling, "log_warning")

    assert estimate_hp_before_hit(ratio, scale, max_hp, 0) == HP_UNAVAILABLE
    mock_warning.assert_called_once()


def test_non_integer_damage_sum_is_unavailable(mocker):
    mock_warning = mocker.patch.object(error_handling, "log_warning")

    assert estimate_hp_before_hit(15, 30, 99, None) == HP_UNAVAILABLE
    mock_warning.assert_called_once()


def test_whole_float_readings_are_accepted():
    assert estimate_hp_before_hit(15.0, 30.0, 99.0, 20.0) == 70
