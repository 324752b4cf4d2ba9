"""Procedural FnPcZn coordinates from a fluorination level.

The generator builds the structure ring by ring from closed-form
trigonometric expressions of loop indices.  There is no random state,
no relaxation and no collision detection, so the same level always
yields the same coordinates.

The small out-of-plane offsets on the ring carbons and peripheral
fluorines are cosmetic: they keep the flat macrocycle from looking
degenerate when rotated edge-on.  They are not a physical result.
"""

from __future__ import annotations

import numpy as np

from linstead._constants import (
    ARM_FLUORINE_LENGTH,
    ARM_LENGTH,
    ARMS_PER_GROUP,
    AROMATIC_F_RADIUS,
    ATOMS_PER_GROUP,
    CARBON_RING_RADIUS,
    FLUORINES_PER_ARM,
    NITROGEN_RING_RADIUS,
    PERIPHERAL_F_RADIUS,
    PERIPHERAL_JITTER,
    PERIPHERAL_LIFT,
    RING_CARBONS,
    RING_NITROGENS,
    RING_PUCKER,
    SUBSTITUENT_RADIUS,
)
from linstead.model import (
    LEVEL_PROFILES,
    AtomRecord,
    Element,
    FluorinationLevel,
    LevelProfile,
)

_RING_STEP = 2.0 * np.pi / RING_CARBONS
_Z_AXIS = np.array([0.0, 0.0, 1.0])

# Branch geometry: each arm leans outward by this fraction of its
# length and spreads the rest around the parent bond.
_LEAN = 0.5
_SPREAD = np.sqrt(1.0 - _LEAN**2)


def expected_atom_count(profile: LevelProfile) -> int:
    """Atom count :func:`generate` produces for a level with *profile*."""
    return (
        1
        + RING_CARBONS
        + RING_NITROGENS
        + RING_CARBONS
        + profile.extra_peripheral_fluorines
        + ATOMS_PER_GROUP * profile.substituent_groups
    )


def _atom(element: Element, pos: np.ndarray) -> AtomRecord:
    return AtomRecord(element, float(pos[0]), float(pos[1]), float(pos[2]))


def _ring_pucker(i: int) -> float:
    return RING_PUCKER * np.sin(2.0 * i * _RING_STEP)


def _perpendicular_basis(d: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Two unit vectors orthogonal to unit vector *d* and to each other."""
    ref = _Z_AXIS if abs(d[2]) < 0.9 else np.array([1.0, 0.0, 0.0])
    u = np.cross(d, ref)
    u /= np.linalg.norm(u)
    v = np.cross(d, u)
    return u, v


def _macrocycle() -> list[AtomRecord]:
    atoms = [_atom(Element.ZINC, np.zeros(3))]
    for i in range(RING_CARBONS):
        theta = i * _RING_STEP
        atoms.append(_atom(Element.CARBON, np.array([
            CARBON_RING_RADIUS * np.cos(theta),
            CARBON_RING_RADIUS * np.sin(theta),
            _ring_pucker(i),
        ])))
    n_step = 2.0 * np.pi / RING_NITROGENS
    for j in range(RING_NITROGENS):
        theta = j * n_step + 0.5 * _RING_STEP
        atoms.append(_atom(Element.NITROGEN, np.array([
            NITROGEN_RING_RADIUS * np.cos(theta),
            NITROGEN_RING_RADIUS * np.sin(theta),
            0.0,
        ])))
    return atoms


def _aromatic_fluorines() -> list[AtomRecord]:
    atoms = []
    for i in range(RING_CARBONS):
        theta = i * _RING_STEP
        atoms.append(_atom(Element.FLUORINE, np.array([
            AROMATIC_F_RADIUS * np.cos(theta),
            AROMATIC_F_RADIUS * np.sin(theta),
            _ring_pucker(i),
        ])))
    return atoms


def _peripheral_fluorines(count: int) -> list[AtomRecord]:
    atoms = []
    for k in range(count):
        # Quarter-step offset keeps these off the aromatic fluorine rays.
        theta = 2.0 * np.pi * k / count + 0.25 * _RING_STEP
        radius = PERIPHERAL_F_RADIUS + (
            PERIPHERAL_JITTER if k % 2 == 0 else -PERIPHERAL_JITTER
        )
        atoms.append(_atom(Element.FLUORINE, np.array([
            radius * np.cos(theta),
            radius * np.sin(theta),
            PERIPHERAL_LIFT * np.sin(k * np.pi / 3.0),
        ])))
    return atoms


def _substituent_group(theta: float) -> list[AtomRecord]:
    """One anchor carbon with three arm carbons, each capped by three F."""
    radial = np.array([np.cos(theta), np.sin(theta), 0.0])
    tangent = np.array([-np.sin(theta), np.cos(theta), 0.0])
    anchor = SUBSTITUENT_RADIUS * radial

    atoms = [_atom(Element.CARBON, anchor)]
    arms = []
    for a in range(ARMS_PER_GROUP):
        phi = 2.0 * np.pi * a / ARMS_PER_GROUP
        direction = _LEAN * radial + _SPREAD * (
            np.cos(phi) * tangent + np.sin(phi) * _Z_AXIS
        )
        arm = anchor + ARM_LENGTH * direction
        arms.append((arm, direction, phi))
        atoms.append(_atom(Element.CARBON, arm))

    for arm, direction, phi in arms:
        u, v = _perpendicular_basis(direction)
        for f in range(FLUORINES_PER_ARM):
            psi = phi + 2.0 * np.pi * f / FLUORINES_PER_ARM
            bond = _LEAN * direction + _SPREAD * (np.cos(psi) * u + np.sin(psi) * v)
            atoms.append(_atom(Element.FLUORINE, arm + ARM_FLUORINE_LENGTH * bond))
    return atoms


def generate(level: FluorinationLevel) -> list[AtomRecord]:
    """Synthesise the atoms of the FnPcZn monomer at *level*.

    Atoms are returned in construction order: the zinc centre, the 16
    ring carbons, the 8 nitrogens, the 16 aromatic fluorines, the
    extra peripheral fluorines, then each substituent group (anchor,
    three arms, nine fluorines).

    Args:
        level: The fluorination level.

    Returns:
        A new list of :class:`AtomRecord`, with length
        ``1 + 16 + 8 + 16 + extra + 13 * groups``.
    """
    profile = LEVEL_PROFILES[FluorinationLevel(level)]

    atoms = _macrocycle()
    atoms.extend(_aromatic_fluorines())
    atoms.extend(_peripheral_fluorines(profile.extra_peripheral_fluorines))

    n_groups = profile.substituent_groups
    for g in range(n_groups):
        # Anchors sit between the pyrrole units, a quarter turn apart
        # for four groups.
        theta = 2.0 * np.pi * g / n_groups + np.pi / 4.0
        atoms.extend(_substituent_group(theta))
    return atoms
