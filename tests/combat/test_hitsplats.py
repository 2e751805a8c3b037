"""
Tests for hitsplat counting and animation data.
"""

import pytest
from combat_odds.combat import hitsplats
from combat_odds.combat.hitsplats import AnimationData, expected_hit_count


@pytest.fixture
def claws_special():
    """A special attack animation with two groups of two hitsplats."""
    return AnimationData(
        animation_id=7514,
        name=" Dragon claws special ",
        hitsplat_group_pattern=[2, 2],
        is_special=True,
    )


def test_unknown_animation_defaults_to_one_hit():
    assert expected_hit_count(None) == 1


def test_pattern_is_summed():
    assert expected_hit_count([2, 1, 1]) == 4
    assert expected_hit_count((1, 1)) == 2


def test_empty_pattern_has_no_hits():
    assert expected_hit_count([]) == 0


def test_animation_data_pattern_is_used(claws_special):
    assert expected_hit_count(claws_special) == 4
    assert claws_special.expected_hits == 4
    assert claws_special.name == "Dragon claws special"


def test_animation_data_defaults_to_single_hit():
    animation = AnimationData(animation_id=422)
    assert animation.hitsplat_group_pattern == [1]
    assert not animation.is_special
    assert expected_hit_count(animation) == 1


def test_negative_group_is_rejected():
    with pytest.raises(ValueError):
        AnimationData(animation_id=1, hitsplat_group_pattern=[1, -1])


@pytest.mark.parametrize("pattern", ["22", 4, [2, "1"], [1.5, 2], {2, 2}])
def test_malformed_pattern_defaults_to_one_hit(mocker, pattern):
    """
    Test that a pattern that cannot be summed falls back to one hit.
    """
    mock_warning = mocker.patch.object(hitsplats, "log_warning")

    assert expected_hit_count(pattern) == 1
    mock_warning.assert_called_once()
