"""
KO chance module for the combat odds engine.

Estimates the probability that a single attack knocks out a target whose
HP is known. Damage is modeled as a discrete uniform roll over
[min_hit, max_hit]; a miss never deals damage, so accuracy scales the whole
distribution.
"""

from typing import Any, Optional

from catchery import log_warning
from pydantic import BaseModel, Field

from combat_odds.core.constants import EstimateStatus
from combat_odds.core.error_handling import (
    clamp_probability,
    ensure_int_in_range,
    ensure_number,
    ensure_whole_number,
)


class DamageRange(BaseModel):
    """Inclusive range of damage a connecting attack can roll."""

    min_hit: int = Field(
        description="The lowest damage a connecting attack can roll",
    )
    max_hit: int = Field(
        description="The highest damage a connecting attack can roll",
    )

    @property
    def outcome_count(self) -> int:
        """Number of equally likely damage values in the range."""
        return self.max_hit - self.min_hit + 1

    def clamped(self, context: Optional[dict[str, Any]] = None) -> "DamageRange":
        """
        Returns a copy with min_hit forced into [0, max_hit].

        Args:
            context (dict[str, Any] | None):
                Additional context for logging a correction.

        Returns:
            DamageRange:
                The normalized range.

        """
        min_hit = ensure_int_in_range(
            self.min_hit,
            "min_hit",
            0,
            self.max_hit,
            context,
        )
        return DamageRange(min_hit=min_hit, max_hit=self.max_hit)

    def hits_at_least(self, threshold: int) -> int:
        """
        Counts the damage values in the range that reach a threshold.

        Args:
            threshold (int):
                The damage that has to be met or exceeded.

        Returns:
            int:
                The number of damage values >= threshold.

        """
        effective = max(self.min_hit, threshold)
        return max(0, self.max_hit - effective + 1)


class KoChanceEstimate(BaseModel):
    """Detailed result of a KO chance estimation."""

    status: EstimateStatus = Field(
        description="Why the estimation did or did not produce a number",
    )
    chance: float | None = Field(
        default=None,
        description="Probability of a KO, only set when status is OK",
    )

    @property
    def is_determinate(self) -> bool:
        return self.status.is_determinate


def evaluate_ko_chance(
    accuracy: float,
    min_hit: int,
    max_hit: int,
    opponent_hp: int,
) -> KoChanceEstimate:
    """
    Calculates the chance of knocking out an opponent with a single hit.

    Args:
        accuracy (float):
            The attacker's accuracy (0.0 to 1.0).
        min_hit (int):
            The attacker's minimum possible hit.
        max_hit (int):
            The attacker's maximum possible hit.
        opponent_hp (int):
            The estimated HP of the opponent before the hit.

    Returns:
        KoChanceEstimate:
            The status of the estimation, with the KO chance when it could
            be determined.

    """
    context = {
        "accuracy": accuracy,
        "min_hit": min_hit,
        "max_hit": max_hit,
        "opponent_hp": opponent_hp,
        "context": "ko_chance",
    }
    min_hit = ensure_whole_number(min_hit, "min_hit", context)
    max_hit = ensure_whole_number(max_hit, "max_hit", context)
    opponent_hp = ensure_whole_number(opponent_hp, "opponent_hp", context)
    if (
        min_hit is None
        or max_hit is None
        or opponent_hp is None
        or not ensure_number(accuracy, "accuracy", context)
    ):
        return KoChanceEstimate(status=EstimateStatus.INVALID_INPUT)

    if opponent_hp <= 0:
        return KoChanceEstimate(status=EstimateStatus.INVALID_TARGET_HP)
    if max_hit < opponent_hp:
        return KoChanceEstimate(status=EstimateStatus.KO_IMPOSSIBLE)

    damage = DamageRange(min_hit=min_hit, max_hit=max_hit).clamped(context)

    total_possible_hits = damage.outcome_count
    if total_possible_hits <= 0:
        log_warning(
            f"Calculated total possible hits <= 0 "
            f"(min: {damage.min_hit}, max: {damage.max_hit})",
            {
                **context,
                "clamped_min_hit": damage.min_hit,
                "total_possible_hits": total_possible_hits,
            },
        )
        return KoChanceEstimate(status=EstimateStatus.DEGENERATE_RANGE)

    ko_hits = damage.hits_at_least(opponent_hp)
    chance = accuracy * (ko_hits / total_possible_hits)
    return KoChanceEstimate(
        status=EstimateStatus.OK,
        chance=clamp_probability(chance),
    )


def estimate_ko_chance(
    accuracy: float,
    min_hit: int,
    max_hit: int,
    opponent_hp: int,
) -> float | None:
    """
    Returns the KO chance of a single hit, or None when there is none to give.

    None covers malformed input, a target whose HP is above the max hit, a
    non-positive target HP, and a degenerate damage range. Use evaluate_ko_chance to tell them
    apart.
    """
    return evaluate_ko_chance(accuracy, min_hit, max_hit, opponent_hp).chance
