"""Default ball-and-stick styling and covalent radii (Cordero 2008).

The styling policy is fixed per element: carbon and nitrogen are drawn
as sticks only, fluorine and hydrogen as small balls on sticks, and
the zinc centre as a single large ball.
"""

from __future__ import annotations

from linstead.model import ElementStyle

# Covalent radii in angstroms (Cordero et al., Dalton Trans. 2008).
COVALENT_RADII: dict[str, float] = {
    "H":  0.31,
    "C":  0.76,
    "N":  0.71,
    "F":  0.57,
    "Zn": 1.22,
}

BASE_STYLE = ElementStyle(colour="#c8d7ff", stick_radius=0.15)
"""Style applied to every atom before the per-element overrides."""

ELEMENT_STYLES: dict[str, ElementStyle] = {
    "C":  ElementStyle(colour="#d7e2ff", stick_radius=0.14),
    "N":  ElementStyle(colour="#8de8ff", stick_radius=0.17),
    "F":  ElementStyle(colour="#74ffd1", sphere_radius=0.32, stick_radius=0.11),
    "Zn": ElementStyle(colour="#86a6ff", sphere_radius=0.62),
    "H":  ElementStyle(colour="#f8f7fc", sphere_radius=0.2, stick_radius=0.06),
}


def default_element_style(element: str) -> ElementStyle:
    """Return the default style for *element*.

    Falls back to :data:`BASE_STYLE` for elements without an entry.
    """
    return ELEMENT_STYLES.get(element, BASE_STYLE)


def bond_cutoff(sp_a: str, sp_b: str, *, tolerance: float = 0.4) -> float:
    """Maximum bonded distance between two species.

    Uses the sum-of-covalent-radii heuristic
    ``r_a + r_b + tolerance``.  Unknown species use a radius of 0.75.
    """
    return (
        COVALENT_RADII.get(sp_a, 0.75)
        + COVALENT_RADII.get(sp_b, 0.75)
        + tolerance
    )
