"""
Combat odds package.

Pure estimators for PvP combat tracking: KO chances of single hits and of a
two-tick special attack, HP estimates from health bar readings, and expected
hitsplat counts.
"""

from .core import (
    HP_UNAVAILABLE,
    AnimationRepository,
    EstimateStatus,
    SpecialConnectCase,
    setup_logging,
)
from .combat.equipment import fix_item_id, fix_item_ids
from .combat.health_bar import (
    HealthObservation,
    HpRange,
    estimate_hp_after_hit,
    estimate_hp_before_hit,
    health_bar_hp_range,
)
from .combat.hitsplats import AnimationData, expected_hit_count
from .combat.ko_chance import (
    DamageRange,
    KoChanceEstimate,
    estimate_ko_chance,
    evaluate_ko_chance,
)
from .combat.special_attack import (
    SpecialAttackParameters,
    estimate_two_phase_special_ko,
    per_swing_accuracy,
)

__all__ = [
    "HP_UNAVAILABLE",
    "AnimationRepository",
    "EstimateStatus",
    "SpecialConnectCase",
    "setup_logging",
    "fix_item_id",
    "fix_item_ids",
    "HealthObservation",
    "HpRange",
    "estimate_hp_after_hit",
    "estimate_hp_before_hit",
    "health_bar_hp_range",
    "AnimationData",
    "expected_hit_count",
    "DamageRange",
    "KoChanceEstimate",
    "estimate_ko_chance",
    "evaluate_ko_chance",
    "SpecialAttackParameters",
    "estimate_two_phase_special_ko",
    "per_swing_accuracy",
]
