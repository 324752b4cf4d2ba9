"""Capabilities the viewer session needs from a rendering engine.

The session drives a :class:`RenderSurface` and never looks at the
engine's internal representation, so any backend that implements these
protocols can be plugged in, including test doubles.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class RenderSurface(Protocol):
    """A rendering surface bound to one container."""

    def add_model(self, data: str, fmt: str) -> None:
        """Add a structure in exchange format *fmt*."""
        ...

    def set_style(self, selector: dict, style: dict) -> None:
        """Style atoms matching *selector* (``{}`` or ``{"elem": "F"}``)."""
        ...

    def remove_all_models(self) -> None: ...

    def zoom_to(self) -> None:
        """Fit the camera to the current content."""
        ...

    def render(self) -> None: ...

    def spin(self, axis: str | None, rate: float = 0.0) -> None:
        """Start rotating about *axis*, or stop when *axis* is ``None``."""
        ...

    def resize(self) -> None:
        """Re-fit the viewport and aspect ratio to the container."""
        ...

    def dispose(self) -> None: ...


SurfaceFactory = Callable[[Any, dict], RenderSurface]
"""Creates a surface for ``(container, options)``.

Raises on failure; the session reports any exception as a surface
initialisation error.
"""


class ObserverHandle(Protocol):
    def disconnect(self) -> None: ...


class ContainerObserver(Protocol):
    """Reports container size changes."""

    def observe(
        self, container: Any, callback: Callable[[], None],
    ) -> ObserverHandle:
        """Invoke *callback* whenever *container* changes size."""
        ...
