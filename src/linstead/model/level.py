from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum

from linstead.errors import InvalidRecipeError


class FluorinationLevel(IntEnum):
    """Ordered fluorination ranks of the procedural recipes.

    The integer value is the rank; the name is the nominal fluorine
    count of the corresponding monomer.
    """

    F16 = 0
    F40 = 1
    F52 = 2
    F64 = 3


@dataclass(frozen=True)
class LevelProfile:
    """Recipe parameters for one fluorination level.

    The counts are hand-tuned configuration data chosen so that
    ``16 + extra_peripheral_fluorines + 9 * substituent_groups`` equals
    the level's nominal fluorine count.  They are not derived from the
    chemical formula.

    Attributes:
        substituent_groups: Number of bulky perfluoroalkyl-type groups.
        extra_peripheral_fluorines: Fluorines placed on the outer ring
            in addition to the 16 aromatic fluorines.
        crowding: Description of steric crowding at this level.
        aggregation: Description of the reported aggregation tendency.
        symmetry: Approximate point-group description.
    """

    substituent_groups: int
    extra_peripheral_fluorines: int
    crowding: str = ""
    aggregation: str = ""
    symmetry: str = ""

    def validate(self) -> None:
        """Check that both counts are non-negative integers.

        Raises:
            InvalidRecipeError: If either count is negative or not an
                integer.
        """
        for name in ("substituent_groups", "extra_peripheral_fluorines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRecipeError(
                    f"{name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise InvalidRecipeError(
                    f"{name} must be non-negative, got {value}"
                )


LEVEL_PROFILES: dict[FluorinationLevel, LevelProfile] = {
    FluorinationLevel.F16: LevelProfile(
        substituent_groups=0,
        extra_peripheral_fluorines=0,
        crowding="Open periphery; aromatic fluorines only.",
        aggregation="Strong reported dimer contribution.",
        symmetry="D4h",
    ),
    FluorinationLevel.F40: LevelProfile(
        substituent_groups=2,
        extra_peripheral_fluorines=6,
        crowding="Two bulky groups on one side of the ring.",
        aggregation="Intermediate; broadened Q-band behaviour.",
        symmetry="C2v-like",
    ),
    FluorinationLevel.F52: LevelProfile(
        substituent_groups=3,
        extra_peripheral_fluorines=9,
        crowding="Strong steric shielding of three quadrants.",
        aggregation="Reduced dimer tendency.",
        symmetry="Cs-like",
    ),
    FluorinationLevel.F64: LevelProfile(
        substituent_groups=4,
        extra_peripheral_fluorines=12,
        crowding="Maximal crowding; every quadrant shielded.",
        aggregation="Monomer preference.",
        symmetry="D4h-like",
    ),
}


def validate_profiles(
    profiles: Mapping[FluorinationLevel, LevelProfile] = LEVEL_PROFILES,
) -> None:
    """Validate a full set of level profiles.

    Every level must have a profile, every profile must have valid
    counts, and counts must not decrease as the level increases.

    Raises:
        InvalidRecipeError: If any check fails.
    """
    missing = [level.name for level in FluorinationLevel if level not in profiles]
    if missing:
        raise InvalidRecipeError(f"missing profiles for levels: {missing}")

    previous: LevelProfile | None = None
    for level in sorted(profiles):
        profile = profiles[level]
        profile.validate()
        if previous is not None and (
            profile.substituent_groups < previous.substituent_groups
            or profile.extra_peripheral_fluorines
            < previous.extra_peripheral_fluorines
        ):
            raise InvalidRecipeError(
                f"profile for {level.name} has fewer substituents than "
                f"the level below it"
            )
        previous = profile


def substituent_group_count(level: FluorinationLevel) -> int:
    """Number of bulky substituent groups at *level*."""
    return LEVEL_PROFILES[level].substituent_groups


def extra_peripheral_fluorine_count(level: FluorinationLevel) -> int:
    """Number of extra peripheral fluorines at *level*."""
    return LEVEL_PROFILES[level].extra_peripheral_fluorines
