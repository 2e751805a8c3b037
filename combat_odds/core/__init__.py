"""
Core system module for the combat odds engine.

This module contains the shared building blocks of the estimators, including
constants, input normalization, logging setup and content loading.
"""

from .constants import (
    DEFAULT_EXPECTED_HITS,
    HP_UNAVAILABLE,
    ITEM_OFFSET,
    SPECIAL_ATTEMPTS,
    EstimateStatus,
    NiceEnum,
    SpecialConnectCase,
)
from .error_handling import (
    clamp_probability,
    ensure_int_in_range,
    ensure_number,
    ensure_probability,
    ensure_whole_number,
)
from .logging import (
    get_logger,
    setup_logging,
)
from .content import (
    AnimationRepository,
)

__all__ = [
    # Import from constants.py
    "DEFAULT_EXPECTED_HITS",
    "HP_UNAVAILABLE",
    "ITEM_OFFSET",
    "SPECIAL_ATTEMPTS",
    "EstimateStatus",
    "NiceEnum",
    "SpecialConnectCase",
    # Import from error_handling.py
    "clamp_probability",
    "ensure_int_in_range",
    "ensure_number",
    "ensure_probability",
    "ensure_whole_number",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from content.py
    "AnimationRepository",
]
