"""
Damage module for the combat rules.

Handles damage scaling based on the level difference between attacker and
defender, and the application of the scaled damage to the defender.
"""

from typing import Any

from pydantic import BaseModel, Field

from rpg_combat.core.constants import LEVEL_GAP_THRESHOLD
from rpg_combat.core.logging import log_debug, log_info
from rpg_combat.core.validation import ensure_non_negative_int


class SelfTargetError(ValueError):
    """Raised when a character is both the attacker and the defender."""


class DamageOutcome(BaseModel):
    """Describes the result of a single damage application."""

    base: int = Field(
        description="The damage requested by the attacker, after sanitizing.",
    )
    adjusted: int = Field(
        description="The damage after level scaling, subtracted from health.",
    )
    level_difference: int = Field(
        description="Attacker level minus defender level.",
    )
    distance: int = Field(
        default=0,
        description="The distance the attack was made from.",
    )
    health_before: int = Field(
        description="The defender's health before the damage.",
    )
    health_after: int = Field(
        description="The defender's health after the damage.",
    )
    killed: bool = Field(
        default=False,
        description="Whether this damage took the defender from alive to dead.",
    )


def scale_damage(amount: int, level_difference: int) -> int:
    """
    Scales damage by the level difference between attacker and defender.

    Args:
        amount (int):
            The base damage.
        level_difference (int):
            The attacker level minus the defender level.

    Returns:
        int:
            The damage increased by half when the attacker is at least
            LEVEL_GAP_THRESHOLD levels above, halved when at least that many
            levels below, unchanged otherwise.

    """
    if level_difference >= LEVEL_GAP_THRESHOLD:
        return amount + amount // 2
    if level_difference <= -LEVEL_GAP_THRESHOLD:
        return amount // 2
    return amount


def apply_damage(
    attacker: Any,
    defender: Any,
    amount: int,
    distance: int = 0,
) -> DamageOutcome:
    """
    Applies level-scaled damage from the attacker to the defender. Only the
    defender is modified.

    Args:
        attacker (Any):
            The character dealing the damage.
        defender (Any):
            The character receiving the damage.
        amount (int):
            The base damage, negative values are corrected to zero.
        distance (int):
            The distance between the two characters, recorded but not used.
            Values that are not non-negative integers are corrected.

    Raises:
        SelfTargetError:
            If attacker and defender are the same character.

    Returns:
        DamageOutcome:
            The details of the damage applied.

    """
    from rpg_combat.character.main import Character

    assert isinstance(attacker, Character), "Attacker must be a Character"
    assert isinstance(defender, Character), "Defender must be a Character"

    if attacker is defender:
        raise SelfTargetError("A character cannot deal damage to itself")

    base = ensure_non_negative_int(amount, "damage", context={"distance": distance})
    distance = ensure_non_negative_int(distance, "distance", context={"damage": base})
    level_difference = attacker.level - defender.level
    adjusted = scale_damage(base, level_difference)

    health_after = defender.health - adjusted
    # Health never rises here, so a dead defender stays dead.
    alive_after = defender.alive and health_after > 0

    outcome = DamageOutcome(
        base=base,
        adjusted=adjusted,
        level_difference=level_difference,
        distance=distance,
        health_before=defender.health,
        health_after=health_after,
        killed=defender.alive and not alive_after,
    )

    defender.health = health_after
    defender.alive = alive_after

    log_debug(
        f"Defender takes {adjusted} damage",
        {
            "base": base,
            "level_difference": level_difference,
            "distance": distance,
            "health": defender.health,
        },
    )
    if outcome.killed:
        log_info("Defender has died", {"health": defender.health})

    return outcome
