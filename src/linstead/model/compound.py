from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath
from typing import Literal

from linstead.model.level import FluorinationLevel


class Category(StrEnum):
    """Which selector group a compound belongs to."""

    MONOMER = "monomer"
    DIMER = "dimer"
    REFERENCE = "reference"


class Provenance(StrEnum):
    """Whether a structure comes from an authoritative source.

    ``DIRECT`` structures are public deposited coordinates; ``DERIVED``
    structures are visualisation surrogates assembled or synthesised
    from them.
    """

    DIRECT = "direct"
    DERIVED = "derived"


@dataclass(frozen=True)
class RemoteSource:
    """A pre-authored structure file fetched from a structure store.

    Attributes:
        locator: Path or URL passed to the store's ``fetch``.
    """

    locator: str
    kind: Literal["remote"] = "remote"

    def __post_init__(self) -> None:
        if not self.locator:
            raise ValueError("locator must be a non-empty string")

    @property
    def format(self) -> str:
        """Exchange format inferred from the locator suffix."""
        suffix = PurePosixPath(self.locator.split("?", 1)[0]).suffix.lower()
        return suffix.lstrip(".") or "sdf"


@dataclass(frozen=True)
class ProceduralSource:
    """A structure synthesised locally by the geometry generator.

    Attributes:
        level: Fluorination level passed to the generator.
    """

    level: FluorinationLevel
    kind: Literal["procedural"] = "procedural"


StructureSource = RemoteSource | ProceduralSource


@dataclass(frozen=True)
class CompoundDescriptor:
    """Static metadata for one selectable compound.

    Attributes:
        id: Unique key, e.g. ``"F64"``.
        category: Selector group.
        provenance: Direct or derived geometry.
        display_label: Human-readable label for the selector.
        formula: Molecular formula text.
        source: Where the structure comes from.
        summary: One-line description shown beside the viewer.
        citation: Attribution for the structure's origin.
    """

    id: str
    category: Category
    provenance: Provenance
    display_label: str
    formula: str
    source: StructureSource
    summary: str = ""
    citation: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id must be a non-empty string")

    @property
    def is_procedural(self) -> bool:
        return isinstance(self.source, ProceduralSource)
