"""Concrete rendering surfaces for :class:`~linstead.session.ViewerSession`."""

from linstead.rendering.mpl_surface import (
    MplResizeObserver,
    MplSurface,
    create_mpl_surface,
)

__all__ = ["MplResizeObserver", "MplSurface", "create_mpl_surface"]
