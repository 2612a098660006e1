"""
Constants and enumerations for the combat rules.

Defines the health and level limits, the level gap that triggers damage
scaling, and the fighter archetypes a character can be created with.
"""

from enum import Enum
from typing import Any

# Health a character is created with, and the cap healing can never exceed.
MAX_HEALTH = 1000

# Level every character starts at.
DEFAULT_LEVEL = 1

# Level difference (in either direction) at which damage gets scaled.
LEVEL_GAP_THRESHOLD = 5

# Maximum range of each fighter archetype.
MELEE_MAX_RANGE = 2
RANGED_MAX_RANGE = 20


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class FighterType(NiceEnum):
    """Defines the fighting archetype a character is created as."""

    MELEE = "MELEE"
    RANGED = "RANGED"

    @property
    def profile(self) -> Any:
        """Returns the FighterProfile holding the attributes of this type."""
        from rpg_combat.character.fighter_profile import get_fighter_profile

        return get_fighter_profile(self)

    @property
    def max_range(self) -> int:
        """Returns the maximum range of this fighter type."""
        return self.profile.max_range

