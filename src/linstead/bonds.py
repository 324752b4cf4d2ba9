"""Bond detection for ball-and-stick drawing."""

from __future__ import annotations

import numpy as np

from linstead.defaults import bond_cutoff


def compute_bonds(
    species: list[str],
    coords: np.ndarray,
    *,
    tolerance: float = 0.4,
) -> list[tuple[int, int]]:
    """Find bonded atom pairs from covalent-radius cutoffs.

    A pair ``(i, j)`` with ``i < j`` is bonded when its distance is
    positive and no larger than :func:`bond_cutoff` for the two
    species.  Cutoffs are pre-computed per unique species pair so the
    pair loop is a single vectorised comparison.

    Args:
        species: Species labels, length ``n_atoms``.
        coords: Coordinates array of shape ``(n_atoms, 3)``.
        tolerance: Distance added to the sum of covalent radii.

    Returns:
        Sorted list of ``(i, j)`` index pairs.
    """
    n_atoms = len(species)
    if n_atoms < 2:
        return []

    coords = np.asarray(coords, dtype=float)
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    dist_matrix = np.linalg.norm(diff, axis=2)

    unique = sorted(set(species))
    index = {sp: k for k, sp in enumerate(unique)}
    table = np.array([
        [bond_cutoff(a, b, tolerance=tolerance) for b in unique]
        for a in unique
    ])
    codes = np.array([index[sp] for sp in species])
    cutoffs = table[codes[:, np.newaxis], codes[np.newaxis, :]]

    upper = np.triu(np.ones((n_atoms, n_atoms), dtype=bool), k=1)
    hits = upper & (dist_matrix > 0.0) & (dist_matrix <= cutoffs)
    ii, jj = np.nonzero(hits)
    return [(int(i), int(j)) for i, j in zip(ii, jj)]
