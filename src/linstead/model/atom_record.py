from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import numpy as np


class Element(StrEnum):
    """Elements that appear in the FnPcZn structures."""

    CARBON = "C"
    NITROGEN = "N"
    FLUORINE = "F"
    ZINC = "Zn"
    HYDROGEN = "H"

    @classmethod
    def from_symbol(cls, symbol: str) -> Element:
        """Look up an element by symbol, ignoring case.

        Raises:
            ValueError: If *symbol* is not a supported element.
        """
        normalised = symbol.strip().capitalize()
        try:
            return cls(normalised)
        except ValueError:
            raise ValueError(f"Unsupported element symbol: {symbol!r}")


@dataclass(frozen=True)
class AtomRecord:
    """A single atom: element and Cartesian position in angstroms.

    Attributes:
        element: The atom's element.
        x: Cartesian x coordinate.
        y: Cartesian y coordinate.
        z: Cartesian z coordinate.
    """

    element: Element
    x: float
    y: float
    z: float

    @property
    def position(self) -> np.ndarray:
        """Position as a length-3 float array."""
        return np.array([self.x, self.y, self.z], dtype=float)


def atoms_to_arrays(atoms: list[AtomRecord]) -> tuple[list[str], np.ndarray]:
    """Split atom records into species labels and an ``(n, 3)`` array."""
    species = [atom.element.value for atom in atoms]
    coords = np.array(
        [[atom.x, atom.y, atom.z] for atom in atoms], dtype=float,
    ).reshape(-1, 3)
    return species, coords
