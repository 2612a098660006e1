"""
Input sanitizing helpers for damage and healing amounts.
"""

from typing import Any, Optional

from catchery import log_warning


def ensure_non_negative_int(
    value: Any, param_name: str, default: int = 0, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Ensures a value is a non-negative integer, correcting if needed.
    Logs a warning for invalid values but continues execution.

    Args:
        value: The value to ensure is a non-negative integer
        param_name: Human-readable parameter name for error messages
        default: Default value if the value cannot be converted
        context: Additional context for logging

    Returns:
        int: The corrected integer value
    """
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        corrected = max(0, int(value))
    else:
        corrected = default
    log_warning(
        f"{param_name} must be non-negative integer, got: {value}, correcting to {corrected}",
        {
            **(context or {}),
            "param_name": param_name,
            "value": value,
            "corrected_to": corrected,
        },
    )
    return corrected
