"""
Character management module for the combat rules.

Defines the Character class, created from a fighter archetype, which can deal
level-scaled damage to another character and receive bounded healing.
"""

from rpg_combat.combat.damage import apply_damage
from rpg_combat.core.constants import DEFAULT_LEVEL, MAX_HEALTH, FighterType
from rpg_combat.core.logging import log_debug
from rpg_combat.core.validation import ensure_non_negative_int

from .fighter_profile import get_fighter_profile


class Character:
    """
    Represents a character taking part in combat.

    Attributes:
        health (int):
            The current health. Capped at MAX_HEALTH by healing, but damage can
            take it to zero or below.
        level (int):
            The character level, compared against the opponent's level when
            damage is dealt.
        alive (bool):
            Whether the character is alive. Once false, it stays false.
        max_range (int):
            The maximum range granted by the fighter type the character was
            created with.

    """

    health: int
    level: int
    alive: bool
    max_range: int

    def __init__(self, fighter_type: FighterType) -> None:
        profile = get_fighter_profile(fighter_type)

        self.health = MAX_HEALTH
        self.level = DEFAULT_LEVEL
        self.alive = True
        self.max_range = profile.max_range
        log_debug(f"Created {fighter_type} character", {"max_range": self.max_range})

    @classmethod
    def create(cls, fighter_type: FighterType) -> "Character":
        """
        Creates a new character of the given fighter type.

        Args:
            fighter_type:
                The archetype determining the character's max range.

        Returns:
            Character:
                A character at full health, level 1 and alive.

        """
        return cls(fighter_type)

    def deal_damage(self, defender: "Character", damage: int, distance: int = 0) -> None:
        """
        Deals damage to another character, scaled by the level difference.

        Args:
            defender:
                The character receiving the damage, must not be this character.
            damage:
                The base damage before level scaling.
            distance:
                The distance to the defender. It does not affect the damage.

        Raises:
            SelfTargetError:
                If the defender is this character.

        """
        apply_damage(self, defender, damage, distance)

    def heal(self, amount: int) -> None:
        """
        Increases the character's health by the given amount, up to MAX_HEALTH.
        Dead characters cannot be healed.

        Args:
            amount:
                The amount of healing to apply.

        """
        if not self.alive:
            log_debug("Cannot heal a dead character", {"health": self.health})
            return
        amount = ensure_non_negative_int(amount, "heal amount", context={"health": self.health})
        before = self.health
        self.health = min(self.health + amount, MAX_HEALTH)
        log_debug(
            f"Character heals {self.health - before} health",
            {"requested": amount, "health": self.health},
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(health={self.health}, level={self.level}, "
            f"alive={self.alive}, max_range={self.max_range})"
        )
