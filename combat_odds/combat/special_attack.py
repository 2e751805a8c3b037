"""
Special attack module for the combat odds engine.

Models a claws-style special attack: up to four roll attempts at a constant
per-attempt accuracy, where only the first attempt that succeeds connects.
The connecting attempt splits one base roll H across two delivery ticks, and
the target gets one chance to heal between them.

The caller supplies the special's aggregate values, already folded across
the four attempts:

    spec_accuracy = 1 - (1 - a) ** 4
    spec_max_hit  = 2 * M + 1

Both are inverted here to recover the per-attempt accuracy `a` and the base
max hit `M`.
"""

import math

from pydantic import BaseModel, Field

from combat_odds.core.constants import SPECIAL_ATTEMPTS, SpecialConnectCase
from combat_odds.core.error_handling import (
    clamp_probability,
    ensure_probability,
    ensure_whole_number,
)


class SpecialAttackParameters(BaseModel):
    """Inputs of a two-phase special attack KO estimation."""

    spec_accuracy: float = Field(
        description="Chance that any of the four attempts connects",
    )
    spec_max_hit: int = Field(
        description="Max damage of the special across both ticks",
    )
    hp_before: int = Field(
        description="Target HP before the first tick",
    )
    heal_between: int = Field(
        default=0,
        description="HP the target healed between the two ticks",
    )

    @property
    def base_max_hit(self) -> int:
        return base_max_hit(self.spec_max_hit)


def base_max_hit(spec_max_hit: int) -> int:
    """
    Recovers the single-swing max hit M from spec_max_hit = 2 * M + 1.

    Args:
        spec_max_hit (int):
            The special attack's max hit.

    Returns:
        int:
            The base max hit, never negative.

    """
    return max(0, (spec_max_hit - 1) // 2)


def per_swing_accuracy(spec_accuracy: float) -> float:
    """
    Recovers the per-attempt accuracy from the aggregate spec accuracy.

    Solves spec_accuracy = 1 - (1 - a) ** 4 for a. The fourth root is taken
    as expm1(log1p(-x) / 4), which keeps its precision as x approaches 1.

    Args:
        spec_accuracy (float):
            The chance that any of the attempts connects.

    Returns:
        float:
            The per-attempt accuracy, 0.0 or 1.0 at the edges.

    """
    if spec_accuracy <= 0.0:
        return 0.0
    if spec_accuracy >= 1.0:
        return 1.0
    return -math.expm1(math.log1p(-spec_accuracy) / SPECIAL_ATTEMPTS)


def connect_probabilities(accuracy: float) -> dict[SpecialConnectCase, float]:
    """
    Returns the probability of each attempt being the first to connect.

    Args:
        accuracy (float):
            The per-attempt accuracy.

    Returns:
        dict[SpecialConnectCase, float]:
            a * (1 - a) ** k for the k-th case.

    """
    miss = 1.0 - accuracy
    return {
        case: (miss**case.misses_before) * accuracy
        for case in SpecialConnectCase
    }


def tick_damage(case: SpecialConnectCase, base_roll: int) -> tuple[int, int]:
    """
    Splits a base roll across the two ticks for a given connect case.

    These splits follow the observed animation timing of the special and
    are kept exactly as measured.

    Args:
        case (SpecialConnectCase):
            Which attempt connected first.
        base_roll (int):
            The base roll H.

    Returns:
        tuple[int, int]:
            The damage delivered on the first tick and on the second tick.

    """
    if case is SpecialConnectCase.FIRST:
        first = base_roll
        second = (base_roll + 1) // 2
        third = base_roll // 4
        # Whatever rounding dropped lands with the last sub-hit.
        remainder = max(0, 2 * base_roll - (first + second + third))
        return first + second, third + remainder
    if case is SpecialConnectCase.SECOND:
        return base_roll, base_roll
    # Third and fourth attempts land everything on the second tick.
    three_quarters = 0.75 * base_roll
    return 0, math.ceil(three_quarters) + math.floor(three_quarters)


def kills_target(first_tick: int, second_tick: int, hp_before: int, heal_between: int) -> bool:
    """
    Whether the two ticks kill a target that healed between them.

    Args:
        first_tick (int):
            Damage on the first tick.
        second_tick (int):
            Damage on the second tick.
        hp_before (int):
            Target HP before the first tick.
        heal_between (int):
            HP healed between the ticks.

    Returns:
        bool:
            True if the target dies on either tick.

    """
    if first_tick >= hp_before:
        return True
    return second_tick >= hp_before - first_tick + heal_between


def estimate_two_phase_special_ko(
    spec_accuracy: float,
    spec_max_hit: int,
    hp_before: int,
    heal_between: int,
) -> float | None:
    """
    Calculates the KO probability of the special across its two ticks.

    Sums P(case) * P(H) over every base roll H in [0, M] and every connect
    case whose tick damage kills the target.

    Args:
        spec_accuracy (float):
            Chance that any of the four attempts connects.
        spec_max_hit (int):
            Max damage of the special (2 * M + 1).
        hp_before (int):
            Target HP before the first tick.
        heal_between (int):
            HP the target healed between the two ticks.

    Returns:
        float | None:
            The KO probability, or None when it cannot be determined.

    """
    context = {
        "spec_max_hit": spec_max_hit,
        "hp_before": hp_before,
        "heal_between": heal_between,
        "context": "two_phase_special_ko",
    }
    spec_max_hit = ensure_whole_number(spec_max_hit, "spec_max_hit", context)
    hp_before = ensure_whole_number(hp_before, "hp_before", context)
    heal_between = ensure_whole_number(heal_between, "heal_between", context)
    if spec_max_hit is None or hp_before is None or heal_between is None:
        return None
    if spec_max_hit <= 0 or hp_before <= 0:
        return None

    params = SpecialAttackParameters(
        spec_accuracy=ensure_probability(spec_accuracy, "spec_accuracy", context),
        spec_max_hit=spec_max_hit,
        hp_before=hp_before,
        heal_between=heal_between,
    )
    max_base = params.base_max_hit
    if max_base <= 0:
        return None

    accuracy = per_swing_accuracy(params.spec_accuracy)
    case_probabilities = connect_probabilities(accuracy)
    roll_weight = 1.0 / (max_base + 1)

    ko = 0.0
    for base_roll in range(max_base + 1):
        for case, case_probability in case_probabilities.items():
            first_tick, second_tick = tick_damage(case, base_roll)
            if kills_target(first_tick, second_tick, params.hp_before, params.heal_between):
                ko += case_probability * roll_weight

    return clamp_probability(ko)
