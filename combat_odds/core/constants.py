"""
Constants and enumerations for the combat odds engine.

Defines the sentinel values, the result status codes of the estimators, and
the connect cases of the two-tick special attack.
"""

from enum import Enum

# Returned by the health-bar estimator when a reading cannot be inverted.
HP_UNAVAILABLE = -1

# Equipment ids coming from a player composition are shifted by this offset.
ITEM_OFFSET = 512

# Number of internal roll attempts of the claws-style special attack.
SPECIAL_ATTEMPTS = 4

# Hits expected from an attack whose animation has no grouping pattern.
DEFAULT_EXPECTED_HITS = 1


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class EstimateStatus(NiceEnum):
    """Outcome of an estimation, distinguishing the reasons for no answer."""

    OK = "OK"
    KO_IMPOSSIBLE = "KO_IMPOSSIBLE"
    INVALID_TARGET_HP = "INVALID_TARGET_HP"
    DEGENERATE_RANGE = "DEGENERATE_RANGE"
    INVALID_INPUT = "INVALID_INPUT"

    @property
    def is_determinate(self) -> bool:
        """Whether the estimation produced a number."""
        return self is EstimateStatus.OK


class SpecialConnectCase(NiceEnum):
    """
    Which of the special attack's attempts is the first one to connect.

    Only the first successful attempt deals damage, so the four cases are
    mutually exclusive. The value is the number of attempts that missed
    before the connecting one.
    """

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3

    @property
    def misses_before(self) -> int:
        return self.value
