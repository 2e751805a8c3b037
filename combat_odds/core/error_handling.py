"""
Input normalization helpers for the estimators.

The estimators never raise on malformed numeric input. These helpers clamp
values back into their valid range and report the correction through
catchery so callers can track upstream anomalies.
"""

import math
from typing import Any, Optional

from catchery import log_warning


def clamp_probability(value: float) -> float:
    """
    Clamps a computed probability into [0, 1].

    Used on final results to absorb floating-point drift; it does not log.

    Args:
        value (float): The value to clamp.

    Returns:
        float: The clamped value.

    """
    return max(0.0, min(value, 1.0))


def ensure_number(
    value: Any,
    param_name: str,
    context: Optional[dict[str, Any]] = None,
) -> bool:
    """
    Checks that a value is a real number other than NaN.
    Logs a warning when it is not.

    Args:
        value: The value to check
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        bool: True if the value can be used in arithmetic.
    """
    if isinstance(value, (int, float)) and not math.isnan(value):
        return True
    log_warning(
        f"{param_name} must be a number, got: {value!r}",
        {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "type": type(value).__name__,
        },
    )
    return False


def ensure_probability(
    value: Any,
    param_name: str,
    context: Optional[dict[str, Any]] = None,
) -> float:
    """
    Ensures a value is a probability, correcting it if needed.
    Logs a warning for out-of-range values but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        float: The value clamped into [0, 1]; non-numeric or NaN values
        become 0.0.
    """
    if not ensure_number(value, param_name, context):
        return 0.0
    corrected = clamp_probability(float(value))
    if corrected != value:
        log_warning(
            f"{param_name} must be within [0, 1], got: {value}, correcting to {corrected}",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "corrected_to": corrected,
            },
        )
    return corrected


def ensure_int_in_range(
    value: int,
    param_name: str,
    min_val: int,
    max_val: Optional[int] = None,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Ensures an integer is within the specified range, correcting if needed.
    Logs a warning for out-of-range values but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive), None for no maximum
        context: Additional context for logging

    Returns:
        int: The corrected integer value. When max_val < min_val the lower
        bound wins.
    """
    corrected = value
    if max_val is not None:
        corrected = min(corrected, max_val)
    corrected = max(min_val, corrected)
    if corrected != value:
        log_warning(
            f"{param_name} out of range, got: {value}, correcting to {corrected}",
            {
                **(context or {}),
                "param_name": param_name,
                "value": value,
                "min_val": min_val,
                "max_val": max_val,
                "corrected_to": corrected,
            },
        )
    return corrected


def ensure_whole_number(
    value: Any,
    param_name: str,
    context: Optional[dict[str, Any]] = None,
) -> Optional[int]:
    """
    Ensures a value is a whole number, converting integral floats.
    Logs a warning for anything else but continues execution.

    Args:
        value: The value to validate
        param_name: Human-readable parameter name for error messages
        context: Additional context for logging

    Returns:
        int | None: The value as an int, or None when it is not a whole
        number (fractions, NaN, infinities, non-numbers).
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    log_warning(
        f"{param_name} must be a whole number, got: {value!r}",
        {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "type": type(value).__name__,
        },
    )
    return None
