"""Linstead: an interactive viewer core for fluorinated zinc phthalocyanines.

Linstead synthesises FnPcZn coordinates procedurally, fetches
deposited structures, and drives a rendering surface through a viewer
session that survives selection changes, resizes and rotation toggles.

Example usage::

    import asyncio
    from linstead import LocalStructureStore, ViewerSession, create_mpl_surface

    async def main():
        session = ViewerSession(create_mpl_surface, LocalStructureStore("public"))
        session.mount(None)
        task = session.select_compound("F52")
        ...
        session.unmount()

    asyncio.run(main())
"""

from linstead.config import ViewerConfig, load_config, save_config
from linstead.errors import (
    InvalidRecipeError,
    LinsteadError,
    StructureLoadError,
    SurfaceInitError,
    ViewerStateError,
)
from linstead.geometry import expected_atom_count, generate
from linstead.model import (
    LEVEL_PROFILES,
    AtomRecord,
    Category,
    CompoundDescriptor,
    Element,
    ElementStyle,
    FluorinationLevel,
    LevelProfile,
    ProceduralSource,
    Provenance,
    RemoteSource,
    extra_peripheral_fluorine_count,
    substituent_group_count,
)
from linstead.parser import format_xyz, parse_sdf, parse_structure, parse_xyz
from linstead.registry import COMPOUNDS, compounds_for_mode, get_compound
from linstead.rendering import MplResizeObserver, MplSurface, create_mpl_surface
from linstead.resolver import StructurePayload, StructureResolver
from linstead.selection import ViewerSelection
from linstead.session import Lifecycle, LoadState, ViewerSession
from linstead.stores import HttpStructureStore, LocalStructureStore

__all__ = [
    "AtomRecord",
    "COMPOUNDS",
    "Category",
    "CompoundDescriptor",
    "Element",
    "ElementStyle",
    "FluorinationLevel",
    "HttpStructureStore",
    "InvalidRecipeError",
    "LEVEL_PROFILES",
    "LevelProfile",
    "Lifecycle",
    "LinsteadError",
    "LoadState",
    "LocalStructureStore",
    "MplResizeObserver",
    "MplSurface",
    "ProceduralSource",
    "Provenance",
    "RemoteSource",
    "StructureLoadError",
    "StructurePayload",
    "StructureResolver",
    "SurfaceInitError",
    "ViewerConfig",
    "ViewerSelection",
    "ViewerSession",
    "ViewerStateError",
    "compounds_for_mode",
    "create_mpl_surface",
    "expected_atom_count",
    "extra_peripheral_fluorine_count",
    "format_xyz",
    "generate",
    "get_compound",
    "load_config",
    "parse_sdf",
    "parse_structure",
    "parse_xyz",
    "save_config",
    "substituent_group_count",
]
