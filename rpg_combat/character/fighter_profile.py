from pydantic import BaseModel, Field

from rpg_combat.core.constants import MELEE_MAX_RANGE, RANGED_MAX_RANGE, FighterType


class FighterProfile(BaseModel):
    """
    Represents the attributes a fighter archetype grants to the characters
    created with it.
    """

    fighter_type: FighterType = Field(
        description="The archetype this profile describes.",
    )
    max_range: int = Field(
        ge=0,
        description="The maximum distance at which this archetype can fight.",
    )

    def __hash__(self) -> int:
        """
        Hash the profile based on its fighter type.

        Returns:
            int:
                The hash value of the profile.

        """
        return hash(self.fighter_type)


FIGHTER_PROFILES: dict[FighterType, FighterProfile] = {
    FighterType.MELEE: FighterProfile(
        fighter_type=FighterType.MELEE,
        max_range=MELEE_MAX_RANGE,
    ),
    FighterType.RANGED: FighterProfile(
        fighter_type=FighterType.RANGED,
        max_range=RANGED_MAX_RANGE,
    ),
}


def get_fighter_profile(fighter_type: FighterType) -> FighterProfile:
    """
    Returns the profile of the given fighter type.

    Args:
        fighter_type (FighterType): The archetype to look up.

    Raises:
        ValueError: If the value is not a FighterType.

    Returns:
        FighterProfile: The profile of the archetype.

    """
    if not isinstance(fighter_type, FighterType):
        raise ValueError(
            f"fighter_type must be FighterType enum, got: {type(fighter_type).__name__}"
        )
    return FIGHTER_PROFILES[fighter_type]
