"""
Core system module for the combat rules.

This module contains the rule constants, the fighter archetypes, logging setup
and the input sanitizing helpers shared by the rest of the package.
"""

from .constants import (
    DEFAULT_LEVEL,
    LEVEL_GAP_THRESHOLD,
    MAX_HEALTH,
    MELEE_MAX_RANGE,
    RANGED_MAX_RANGE,
    FighterType,
    NiceEnum,
)
from .logging import (
    get_logger,
    log_debug,
    log_info,
    setup_logging,
)
from .validation import ensure_non_negative_int

__all__ = [
    # Import from constants.py
    "DEFAULT_LEVEL",
    "LEVEL_GAP_THRESHOLD",
    "MAX_HEALTH",
    "MELEE_MAX_RANGE",
    "RANGED_MAX_RANGE",
    "FighterType",
    "NiceEnum",
    # Import from logging.py
    "get_logger",
    "log_debug",
    "log_info",
    "setup_logging",
    # Import from validation.py
    "ensure_non_negative_int",
]
