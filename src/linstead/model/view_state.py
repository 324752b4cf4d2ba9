from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def rotation_matrix(axis: str, angle: float) -> np.ndarray:
    """Rotation matrix about the ``"x"``, ``"y"`` or ``"z"`` axis.

    Args:
        axis: Axis name.
        angle: Rotation angle in radians.

    Raises:
        ValueError: If *axis* is not one of ``"x"``, ``"y"``, ``"z"``.
    """
    c, s = np.cos(angle), np.sin(angle)
    if axis == "x":
        return np.array([
            [1.0, 0.0, 0.0],
            [0.0,   c,  -s],
            [0.0,   s,   c],
        ])
    if axis == "y":
        return np.array([
            [ c,  0.0,  s],
            [0.0, 1.0, 0.0],
            [-s,  0.0,  c],
        ])
    if axis == "z":
        return np.array([
            [  c,  -s, 0.0],
            [  s,   c, 0.0],
            [0.0, 0.0, 1.0],
        ])
    raise ValueError(f"axis must be 'x', 'y' or 'z', got {axis!r}")


@dataclass
class ViewState:
    """Camera state for orthographic 3D-to-2D projection.

    Attributes:
        rotation: 3x3 rotation matrix.
        zoom: Magnification factor.
        centre: 3D point about which to centre the view.
        aspect: Viewport width divided by height.
    """

    rotation: np.ndarray = field(
        default_factory=lambda: np.eye(3, dtype=float)
    )
    zoom: float = 1.0
    centre: np.ndarray = field(
        default_factory=lambda: np.zeros(3, dtype=float)
    )
    aspect: float = 1.0

    def __post_init__(self) -> None:
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")
        if self.aspect <= 0:
            raise ValueError(f"aspect must be positive, got {self.aspect}")

    def project(
        self, coords: np.ndarray, radii: np.ndarray | None = None,
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Project 3D coordinates to 2D with depth information.

        Args:
            coords: Array of shape ``(n, 3)``.
            radii: Optional array of shape ``(n,)`` of sphere radii.

        Returns:
            Tuple of ``(xy, depth, projected_radii)`` where depth is
            larger for atoms closer to the viewer.
        """
        coords = np.asarray(coords, dtype=float).reshape(-1, 3)
        rotated = (coords - self.centre) @ self.rotation.T
        xy = rotated[:, :2] * self.zoom
        if radii is not None:
            projected_radii = np.asarray(radii, dtype=float) * self.zoom
        else:
            projected_radii = np.zeros(len(coords))
        return xy, rotated[:, 2], projected_radii

    def rotate(self, axis: str, angle: float) -> None:
        """Apply an incremental rotation about a screen axis."""
        self.rotation = rotation_matrix(axis, angle) @ self.rotation

    def fit(self, coords: np.ndarray, margin: float = 0.0) -> float:
        """Centre on *coords* and return the rotation-invariant half-extent.

        The extent is the largest distance from the centroid plus
        *margin*, so the structure stays inside the viewport at any
        orientation.
        """
        coords = np.asarray(coords, dtype=float).reshape(-1, 3)
        if len(coords) == 0:
            self.centre = np.zeros(3, dtype=float)
            return 1.0
        self.centre = coords.mean(axis=0)
        dists = np.linalg.norm(coords - self.centre, axis=1)
        return float(np.max(dists) + margin) or 1.0
