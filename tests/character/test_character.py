"""
Tests for character creation, damage and healing.
"""

import pytest
from rpg_combat.character.main import Character
from rpg_combat.combat.damage import SelfTargetError
from rpg_combat.core.constants import FighterType


@pytest.fixture
def attacker():
    return Character(FighterType.MELEE)


@pytest.fixture
def target():
    return Character(FighterType.MELEE)


def test_created_character_has_default_attributes():
    """
    Test that a new character has full health, level 1 and is alive.
    """
    character = Character(FighterType.MELEE)
    assert character.health == 1000
    assert character.level == 1
    assert character.alive is True
    assert character.max_range == 2


def test_melee_character_has_max_range_2():
    assert Character(FighterType.MELEE).max_range == 2


def test_ranged_character_has_max_range_20():
    character = Character.create(FighterType.RANGED)
    assert character.max_range == 20
    assert character.health == 1000
    assert character.level == 1
    assert character.alive


def test_fighter_type_is_not_stored_on_character():
    character = Character(FighterType.RANGED)
    assert not hasattr(character, "fighter_type")


def test_invalid_fighter_type_raises():
    with pytest.raises(ValueError, match="FighterType"):
        Character("MELEE")


def test_deal_100_damage_reduces_health_by_100(attacker, target):
    attacker.deal_damage(target, 100, 0)
    assert target.health == 900
    assert target.alive


def test_deal_damage_does_not_change_attacker(attacker, target):
    attacker.deal_damage(target, 300, 1)
    assert attacker.health == 1000
    assert attacker.level == 1
    assert attacker.alive


def test_character_dies_when_health_reaches_zero(attacker, target):
    attacker.deal_damage(target, 1000, 0)
    assert target.health == 0
    assert not target.alive


def test_dead_character_stays_dead_on_further_damage(attacker, target):
    attacker.deal_damage(target, 1000, 0)
    attacker.deal_damage(target, 100, 0)
    assert target.health == -100
    assert not target.alive


def test_damage_reduced_when_target_is_5_levels_above(attacker, target):
    target.level = attacker.level + 5
    attacker.deal_damage(target, 100, 0)
    assert target.health == 950


def test_damage_increased_when_target_is_5_levels_below(attacker, target):
    attacker.level = target.level + 5
    attacker.deal_damage(target, 100, 0)
    assert target.health == 850


@pytest.mark.parametrize("level_gap", [-4, -1, 1, 4])
def test_damage_unchanged_within_level_gap(attacker, target, level_gap):
    attacker.level = target.level + level_gap
    attacker.deal_damage(target, 100, 0)
    assert target.health == 900


def test_distance_does_not_affect_damage(attacker, target):
    attacker.deal_damage(target, 100, 50)
    assert target.health == 900


def test_character_cannot_damage_itself(attacker):
    with pytest.raises(SelfTargetError):
        attacker.deal_damage(attacker, 100, 0)
    assert attacker.health == 1000
    assert attacker.alive


def test_heal_increases_health(attacker, target):
    attacker.deal_damage(target, 200, 0)
    target.heal(100)
    assert target.health == 900


def test_heal_cannot_exceed_max_health(attacker, target):
    attacker.deal_damage(target, 10, 0)
    target.heal(100)
    assert target.health == 1000


def test_dead_character_cannot_be_healed(attacker, target):
    attacker.deal_damage(target, 1000, 0)
    target.heal(100)
    assert target.health == 0
    assert not target.alive


def test_negative_heal_is_ignored_with_warning(attacker, target, mocker):
    """
    Test that a negative heal amount is corrected to zero and reported.
    """
    mock_warning = mocker.patch("rpg_combat.core.validation.log_warning")
    attacker.deal_damage(target, 200, 0)
    target.heal(-50)
    assert target.health == 800
    mock_warning.assert_called_once()


def test_repr_shows_state():
    character = Character(FighterType.RANGED)
    assert repr(character) == (
        "Character(health=1000, level=1, alive=True, max_range=20)"
    )
