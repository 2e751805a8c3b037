"""
Hitsplat module for the combat odds engine.

Resolves how many damage splats an attack animation produces from its
hitsplat grouping pattern.
"""

from collections.abc import Sequence
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from combat_odds.core.constants import DEFAULT_EXPECTED_HITS


class AnimationData(BaseModel):
    """Describes an attack animation and how its hitsplats are grouped."""

    animation_id: int = Field(
        description="The client animation id",
    )
    name: str = Field(
        default="",
        description="A readable name for the animation",
    )
    hitsplat_group_pattern: list[int] = Field(
        default_factory=lambda: [1],
        description="Hitsplats shown in each visual group, e.g. [2, 2]",
    )
    is_special: bool = Field(
        default=False,
        description="Whether the animation belongs to a special attack",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if any(group < 0 for group in self.hitsplat_group_pattern):
            raise ValueError("hitsplat_group_pattern entries must be non-negative")
        self.name = self.name.strip()

    @property
    def expected_hits(self) -> int:
        return sum(self.hitsplat_group_pattern)


def expected_hit_count(pattern: AnimationData | Sequence[int] | None) -> int:
    """
    Returns how many splats an attack should produce based on its group pattern.

    Args:
        pattern (AnimationData | Sequence[int] | None):
            The animation, or its grouping pattern. None stands for an
            unknown animation.

    Returns:
        int:
            The sum of the pattern, or one hit when there is no usable pattern.

    """
    if pattern is None:
        return DEFAULT_EXPECTED_HITS
    if isinstance(pattern, AnimationData):
        return pattern.expected_hits
    is_int_sequence = isinstance(pattern, Sequence) and not isinstance(pattern, (str, bytes))
    if not is_int_sequence or not all(isinstance(group, int) for group in pattern):
        log_warning(
            f"Malformed hitsplat group pattern: {pattern!r}, assuming one hit",
            {"pattern": pattern, "context": "expected_hit_count"},
        )
        return DEFAULT_EXPECTED_HITS
    return sum(pattern)
