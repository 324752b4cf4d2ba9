"""Core data model for linstead: atoms, compounds, levels and styles.

Everything is re-exported here so that ``from linstead.model import
AtomRecord`` works without knowing the submodule layout.
"""

from linstead.model.atom_record import AtomRecord, Element, atoms_to_arrays
from linstead.model.colour import Colour, colour_to_hex
from linstead.model.compound import (
    Category,
    CompoundDescriptor,
    ProceduralSource,
    Provenance,
    RemoteSource,
    StructureSource,
)
from linstead.model.element_style import ElementStyle
from linstead.model.level import (
    LEVEL_PROFILES,
    FluorinationLevel,
    LevelProfile,
    extra_peripheral_fluorine_count,
    substituent_group_count,
    validate_profiles,
)
from linstead.model.view_state import ViewState, rotation_matrix

__all__ = [
    "AtomRecord",
    "Category",
    "Colour",
    "CompoundDescriptor",
    "Element",
    "ElementStyle",
    "FluorinationLevel",
    "LEVEL_PROFILES",
    "LevelProfile",
    "ProceduralSource",
    "Provenance",
    "RemoteSource",
    "StructureSource",
    "ViewState",
    "atoms_to_arrays",
    "colour_to_hex",
    "extra_peripheral_fluorine_count",
    "rotation_matrix",
    "substituent_group_count",
    "validate_profiles",
]
