"""
Health bar module for the combat odds engine.

A health bar shows HP as `ratio` filled segments out of `scale`. The exact
HP is not recoverable from one reading, so the reading is inverted into the
interval of HP values the client could have rendered that way, and the
midpoint of that interval is used as the point estimate.
"""

from pydantic import BaseModel, Field

from combat_odds.core.constants import HP_UNAVAILABLE
from combat_odds.core.error_handling import ensure_whole_number


class HealthObservation(BaseModel):
    """A quantized health bar reading of a target with known max HP."""

    ratio: int = Field(
        description="Filled segments of the health bar",
    )
    scale: int = Field(
        description="Total segments of the health bar",
    )
    max_hp: int = Field(
        description="The target's maximum HP",
    )

    @property
    def is_valid(self) -> bool:
        return self.ratio >= 0 and self.scale > 0 and self.max_hp > 0


class HpRange(BaseModel):
    """Inclusive interval of HP values consistent with a reading."""

    lower: int = Field(description="Lowest consistent HP")
    upper: int = Field(description="Highest consistent HP")

    @property
    def midpoint(self) -> int:
        """Integer average of the bounds, rounding toward the upper half."""
        return (self.lower + self.upper + 1) // 2


def health_bar_hp_range(ratio: int, scale: int, max_hp: int) -> HpRange | None:
    """
    Inverts a health bar reading into the range of HP it can represent.

    Args:
        ratio (int):
            The health bar ratio after the hit.
        scale (int):
            The health bar scale.
        max_hp (int):
            The target's maximum HP.

    Returns:
        HpRange | None:
            The feasible HP interval, or None if the reading is invalid.

    """
    context = {"ratio": ratio, "scale": scale, "max_hp": max_hp, "context": "health_bar"}
    ratio = ensure_whole_number(ratio, "ratio", context)
    scale = ensure_whole_number(scale, "scale", context)
    max_hp = ensure_whole_number(max_hp, "max_hp", context)
    if ratio is None or scale is None or max_hp is None:
        return None

    observation = HealthObservation(ratio=ratio, scale=scale, max_hp=max_hp)
    if not observation.is_valid:
        return None

    if ratio == 0:
        return HpRange(lower=0, upper=0)

    lower = 1
    if scale > 1:
        if ratio > 1:
            # ceil(max_hp * (ratio - 1) / (scale - 1))
            lower = (max_hp * (ratio - 1) + scale - 2) // (scale - 1)
        upper = min((max_hp * ratio - 1) // (scale - 1), max_hp)
    else:
        # A single-segment bar can only show a ratio of 1.
        upper = max_hp
    return HpRange(lower=lower, upper=upper)


def estimate_hp_after_hit(ratio: int, scale: int, max_hp: int) -> int:
    """
    Estimates the HP shown by a health bar reading.

    Returns:
        int: The midpoint of the feasible HP range, or HP_UNAVAILABLE.

    """
    hp_range = health_bar_hp_range(ratio, scale, max_hp)
    if hp_range is None:
        return HP_UNAVAILABLE
    return hp_range.midpoint


def estimate_hp_before_hit(ratio: int, scale: int, max_hp: int, damage_sum: int) -> int:
    """
    Calculates the opponent's HP before a hit based on their health bar after it.

    Args:
        ratio (int):
            The opponent's health bar ratio after the hit.
        scale (int):
            The opponent's health bar scale.
        max_hp (int):
            The opponent's maximum HP.
        damage_sum (int):
            The total damage dealt by the hitsplat(s) that produced the reading.

    Returns:
        int:
            The estimated HP before the hit, or HP_UNAVAILABLE (-1) if the
            reading cannot be inverted.

    """
    hp_after = estimate_hp_after_hit(ratio, scale, max_hp)
    if hp_after == HP_UNAVAILABLE:
        return HP_UNAVAILABLE
    damage_sum = ensure_whole_number(damage_sum, "damage_sum", {"context": "health_bar"})
    if damage_sum is None:
        return HP_UNAVAILABLE
    return hp_after + damage_sum
