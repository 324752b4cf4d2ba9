"""The fixed catalogue of FnPcZn compounds offered by the viewer.

Locators are paths relative to the structure store root, matching the
``structures/`` directory served alongside the viewer.
"""

from __future__ import annotations

from collections.abc import Iterable

from linstead.model import (
    Category,
    CompoundDescriptor,
    FluorinationLevel,
    ProceduralSource,
    Provenance,
    RemoteSource,
    validate_profiles,
)

COMPOUNDS: tuple[CompoundDescriptor, ...] = (
    CompoundDescriptor(
        id="H16",
        category=Category.REFERENCE,
        provenance=Provenance.DIRECT,
        display_label="H16 (ZnPc reference)",
        formula="C32H16N8Zn",
        source=RemoteSource("/structures/H16.sdf"),
        summary="Nonfluorinated baseline used for frontier-orbital and "
                "oscillator comparisons.",
        citation="PubChem CID 114933 (SDF molecular graph).",
    ),
    CompoundDescriptor(
        id="F16",
        category=Category.MONOMER,
        provenance=Provenance.DIRECT,
        display_label="F16 monomer",
        formula="C32F16N8Zn",
        source=RemoteSource("/structures/F16.sdf"),
        summary="Lower fluorination benchmark with stronger reported "
                "dimer contribution.",
        citation="PubChem CID 11377956 (SDF molecular graph).",
    ),
    CompoundDescriptor(
        id="F40",
        category=Category.MONOMER,
        provenance=Provenance.DERIVED,
        display_label="F40 monomer",
        formula="C44F40N8Zn",
        source=ProceduralSource(FluorinationLevel.F40),
        summary="Intermediate fluorination with C2v-like asymmetry and "
                "broadened Q behaviour.",
        citation="Synthesised from the F64 scaffold with two bulky "
                 "peripheral groups removed.",
    ),
    CompoundDescriptor(
        id="F52",
        category=Category.MONOMER,
        provenance=Provenance.DERIVED,
        display_label="F52 monomer",
        formula="C50F52N8Zn",
        source=ProceduralSource(FluorinationLevel.F52),
        summary="Higher fluorination monomer with strong steric shielding "
                "and reduced dimer tendency.",
        citation="Synthesised from the F64 scaffold with one bulky "
                 "peripheral group removed.",
    ),
    CompoundDescriptor(
        id="F64",
        category=Category.MONOMER,
        provenance=Provenance.DIRECT,
        display_label="F64 monomer",
        formula="C56F64N8Zn",
        source=RemoteSource("/structures/F64.sdf"),
        summary="Maximally fluorinated monomer with strongest steric "
                "crowding and monomer preference.",
        citation="PubChem CID 9964044 (SDF molecular graph).",
    ),
    CompoundDescriptor(
        id="F16D",
        category=Category.DIMER,
        provenance=Provenance.DERIVED,
        display_label="F16 dimer",
        formula="(C32F16N8Zn)2",
        source=RemoteSource("/structures/F16_dimer.sdf"),
        summary="Stacked dimer representation used for Q-band splitting "
                "interpretation.",
        citation="Visual assembly of two F16 monomers in the reported "
                 "H-dimer stacking motif.",
    ),
    CompoundDescriptor(
        id="F40D",
        category=Category.DIMER,
        provenance=Provenance.DERIVED,
        display_label="F40 dimer",
        formula="(C44F40N8Zn)2",
        source=RemoteSource("/structures/F40_dimer.sdf"),
        summary="Asymmetric stacked dimer representation matching the "
                "reported F40 dimer analysis.",
        citation="Visual assembly of two F40 monomers.",
    ),
)

REFERENCE_SET: tuple[str, ...] = ("H16", "F16", "F64")
"""Compounds shown together in the reference comparison mode."""

DEFAULT_COMPOUND_ID = "F16"


def validate_registry(compounds: Iterable[CompoundDescriptor]) -> None:
    """Check the catalogue and the level profiles it depends on.

    Raises:
        InvalidRecipeError: If a level profile is invalid.
        ValueError: If compound ids are not unique.
    """
    validate_profiles()
    seen: set[str] = set()
    for compound in compounds:
        if compound.id in seen:
            raise ValueError(f"duplicate compound id: {compound.id!r}")
        seen.add(compound.id)


validate_registry(COMPOUNDS)

_BY_ID: dict[str, CompoundDescriptor] = {c.id: c for c in COMPOUNDS}


def get_compound(compound_id: str) -> CompoundDescriptor:
    """Look up a compound by id.

    Raises:
        KeyError: If no compound has that id.
    """
    try:
        return _BY_ID[compound_id]
    except KeyError:
        raise KeyError(f"unknown compound id: {compound_id!r}") from None


def compounds_for_mode(
    mode: Category | str,
    compounds: Iterable[CompoundDescriptor] = COMPOUNDS,
) -> list[CompoundDescriptor]:
    """Compounds listed under a selector mode.

    The reference mode lists the :data:`REFERENCE_SET` comparison
    compounds (in catalogue order), not just those whose category is
    ``reference``.
    """
    mode = Category(mode)
    if mode is Category.REFERENCE:
        return [c for c in compounds if c.id in REFERENCE_SET]
    return [c for c in compounds if c.category is mode]
