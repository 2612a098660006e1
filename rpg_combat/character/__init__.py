"""
Character system module for the combat rules.

This module handles character creation from fighter archetypes, healing, and
dealing damage to other characters.
"""

from .fighter_profile import FIGHTER_PROFILES, FighterProfile, get_fighter_profile
from .main import Character

__all__ = [
    # Import from fighter_profile.py
    "FIGHTER_PROFILES",
    "FighterProfile",
    "get_fighter_profile",
    # Import from main.py
    "Character",
]
