"""Matplotlib rendering surface: orthographic ball-and-stick drawing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from linstead.bonds import compute_bonds
from linstead.model import ViewState, atoms_to_arrays, colour_to_hex
from linstead.parser import parse_structure

_FRAME_INTERVAL_MS = 33  # ~30 fps spin animation
_FALLBACK_STYLE: dict = {"stick": {"radius": 0.15, "color": "#808080"}}


class MplSurface:
    """A :class:`~linstead.engine.RenderSurface` drawing into a matplotlib figure.

    Atoms are drawn as filled circles in depth order and bonds as
    half-sticks coloured by their end atoms.  The view keeps its own
    rotation, so stopping and restarting the spin animation continues
    from the current orientation.

    Args:
        figure: The figure to draw into.
        antialias: Whether patches and lines are antialiased.
        background: Figure background colour, or ``"none"`` for a
            transparent background.
    """

    def __init__(
        self,
        figure: Figure,
        *,
        antialias: bool = True,
        background: Any = "none",
    ) -> None:
        self.figure = figure
        self.antialias = antialias
        self.ax = figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self.ax.set_axis_off()
        if background != "none":
            figure.set_facecolor(colour_to_hex(background))
        else:
            figure.patch.set_alpha(0.0)

        self.view = ViewState()
        self.models: list[tuple[list[str], np.ndarray, list[tuple[int, int]]]] = []
        self._base_style: dict = _FALLBACK_STYLE
        self._element_styles: dict[str, dict] = {}
        self._extent = 1.0
        self._timer = None
        self._spin_axis: str | None = None
        self._spin_rate = 0.0
        self._disposed = False
        self.resize()

    # ---- RenderSurface ----

    def add_model(self, data: str, fmt: str) -> None:
        self._check_live()
        species, coords = atoms_to_arrays(parse_structure(data, fmt))
        self.models.append((species, coords, compute_bonds(species, coords)))

    def set_style(self, selector: dict, style: dict) -> None:
        self._check_live()
        element = selector.get("elem")
        if element is None:
            self._base_style = style
            self._element_styles.clear()
        else:
            self._element_styles[element] = style

    def remove_all_models(self) -> None:
        self._check_live()
        self.models.clear()

    def zoom_to(self) -> None:
        self._check_live()
        if not self.models:
            return
        coords = np.vstack([m[1] for m in self.models])
        margin = max(
            (s.get("sphere", {}).get("radius", 0.0)
             for s in [self._base_style, *self._element_styles.values()]),
            default=0.0,
        )
        self._extent = self.view.fit(coords, margin=margin)

    def render(self) -> None:
        self._check_live()
        ax = self.ax
        ax.clear()
        ax.set_axis_off()

        half_w = self._extent * max(self.view.aspect, 1.0) / self.view.zoom
        half_h = self._extent * max(1.0 / self.view.aspect, 1.0) / self.view.zoom
        ax.set_xlim(-half_w, half_w)
        ax.set_ylim(-half_h, half_h)
        points_per_unit = self.figure.get_figheight() * 72.0 / (2.0 * half_h)

        for species, coords, bonds in self.models:
            self._draw_model(species, coords, bonds, points_per_unit)
        self.figure.canvas.draw_idle()

    def spin(self, axis: str | None, rate: float = 0.0) -> None:
        self._check_live()
        if axis is None:
            self._spin_axis = None
            if self._timer is not None:
                self._timer.stop()
            return
        self._spin_axis = axis
        self._spin_rate = rate
        if self._timer is None:
            self._timer = self.figure.canvas.new_timer(interval=_FRAME_INTERVAL_MS)
            self._timer.add_callback(self.spin_step)
        self._timer.start()

    def resize(self) -> None:
        self._check_live()
        width, height = self.figure.canvas.get_width_height()
        if width > 0 and height > 0:
            self.view.aspect = width / height

    def dispose(self) -> None:
        if self._disposed:
            return
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self.models.clear()
        self.figure.clear()
        self._disposed = True

    # ---- Drawing ----

    def spin_step(self) -> None:
        """Advance the rotation by one animation frame and redraw."""
        if self._disposed or self._spin_axis is None:
            return
        self.view.rotate(self._spin_axis, self._spin_rate * _FRAME_INTERVAL_MS / 1000.0)
        self.render()

    def _style_for(self, element: str) -> dict:
        return self._element_styles.get(element, self._base_style)

    def _draw_model(
        self,
        species: list[str],
        coords: np.ndarray,
        bonds: list[tuple[int, int]],
        points_per_unit: float,
    ) -> None:
        styles = [self._style_for(sp) for sp in species]
        xy, depth, _ = self.view.project(coords)
        # Undo zoom: axis limits already account for it.
        xy = xy / self.view.zoom

        # Half-sticks: each end takes its own atom's stick style.
        segments, colours, widths = [], [], []
        for i, j in bonds:
            mid = 0.5 * (xy[i] + xy[j])
            for end in (i, j):
                stick = styles[end].get("stick")
                if stick is None:
                    continue
                segments.append([xy[end], mid])
                colours.append(stick["color"])
                widths.append(2.0 * stick["radius"] * points_per_unit)
        if segments:
            self.ax.add_collection(LineCollection(
                segments, colors=colours, linewidths=widths,
                capstyle="round", antialiased=self.antialias, zorder=1,
            ))

        if len(depth) == 0:
            return
        span = float(np.ptp(depth)) or 1.0
        for k in np.argsort(depth):
            sphere = styles[k].get("sphere")
            if sphere is None:
                continue
            self.ax.add_patch(Circle(
                (xy[k, 0], xy[k, 1]), sphere["radius"],
                facecolor=sphere["color"], edgecolor="black", linewidth=0.3,
                antialiased=self.antialias,
                zorder=2.0 + (depth[k] - depth.min()) / span,
            ))

    def _check_live(self) -> None:
        if self._disposed:
            raise RuntimeError("surface has been disposed")


def create_mpl_surface(container: Figure | None, options: dict) -> MplSurface:
    """Surface factory for :class:`~linstead.session.ViewerSession`.

    Args:
        container: The figure to draw into, or ``None`` to create one.
        options: Surface options (``antialias``, ``background``).

    Raises:
        TypeError: If *container* is not a matplotlib figure.
    """
    if container is None:
        container = Figure(figsize=(5.0, 5.0))
    if not isinstance(container, Figure):
        raise TypeError(
            f"container must be a matplotlib Figure, got {type(container).__name__}"
        )
    return MplSurface(
        container,
        antialias=options.get("antialias", True),
        background=options.get("background", "none"),
    )


class _ResizeHandle:
    def __init__(self, figure: Figure, cid: int) -> None:
        self._figure = figure
        self._cid = cid

    def disconnect(self) -> None:
        self._figure.canvas.mpl_disconnect(self._cid)


class MplResizeObserver:
    """Container observer backed by the canvas ``resize_event``."""

    def observe(self, container: Figure, callback: Callable[[], None]) -> _ResizeHandle:
        cid = container.canvas.mpl_connect("resize_event", lambda event: callback())
        return _ResizeHandle(container, cid)
