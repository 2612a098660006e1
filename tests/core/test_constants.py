"""
Tests for the fighter archetypes and their profiles.
"""

import pytest
from pydantic import ValidationError
from rpg_combat.character.fighter_profile import (
    FIGHTER_PROFILES,
    FighterProfile,
    get_fighter_profile,
)
from rpg_combat.character.main import Character
from rpg_combat.core.constants import FighterType


def test_fighter_type_max_range():
    assert FighterType.MELEE.max_range == 2
    assert FighterType.RANGED.max_range == 20


def test_every_fighter_type_has_a_profile():
    for fighter_type in FighterType:
        assert FIGHTER_PROFILES[fighter_type].fighter_type is fighter_type


def test_get_fighter_profile_rejects_non_enum():
    with pytest.raises(ValueError):
        get_fighter_profile("RANGED")


def test_profile_rejects_negative_range():
    with pytest.raises(ValidationError):
        FighterProfile(fighter_type=FighterType.MELEE, max_range=-1)


def test_character_creation_logs_fighter_type(mocker):
    mock_debug = mocker.patch("rpg_combat.character.main.log_debug")
    Character(FighterType.RANGED)
    message, context = mock_debug.call_args.args
    assert message == "Created RANGED character"
    assert context == {"max_range": 20}
