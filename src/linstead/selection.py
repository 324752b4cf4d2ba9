"""Selector state: which mode and compound the user is looking at."""

from __future__ import annotations

import asyncio

from linstead.model import Category, CompoundDescriptor
from linstead.registry import COMPOUNDS, DEFAULT_COMPOUND_ID, compounds_for_mode
from linstead.session import Lifecycle, LoadState, ViewerSession

LOADING_MESSAGE = "Loading selected structure..."
LOAD_FAILED_MESSAGE = "Model loading failed. Check structure files."
SURFACE_FAILED_MESSAGE = "3D viewer unavailable in this environment."


class ViewerSelection:
    """Selector state that drives a :class:`ViewerSession`.

    Holds the current mode (a compound category), the selected
    compound, and the rotation toggle.  Switching to a mode that does
    not contain the selected compound falls back to the first compound
    listed for that mode.

    Args:
        session: The session to drive.
        mode: Initial mode.
        selected_id: Initial compound; must be listed in *mode*,
            otherwise the first compound of *mode* is used.
        spinning: Initial rotation state.
        compounds: Catalogue to select from.
    """

    def __init__(
        self,
        session: ViewerSession,
        *,
        mode: Category | str = Category.MONOMER,
        selected_id: str = DEFAULT_COMPOUND_ID,
        spinning: bool = True,
        compounds: tuple[CompoundDescriptor, ...] = COMPOUNDS,
    ) -> None:
        self.session = session
        self._compounds = compounds
        self.mode = Category(mode)
        self.selected_id = selected_id
        self._ensure_selection_in_mode()
        self.spinning = spinning

    @property
    def entries(self) -> list[CompoundDescriptor]:
        """Compounds listed for the current mode."""
        return compounds_for_mode(self.mode, self._compounds)

    @property
    def selected(self) -> CompoundDescriptor:
        for entry in self.entries:
            if entry.id == self.selected_id:
                return entry
        return self.entries[0] if self.entries else self._compounds[0]

    def _ensure_selection_in_mode(self) -> None:
        self.selected_id = self.selected.id

    def start(self) -> asyncio.Task | None:
        """Push the current selection and rotation state to the session."""
        self.session.set_spinning(self.spinning)
        return self.session.select_compound(self.selected_id)

    def set_mode(self, mode: Category | str) -> asyncio.Task | None:
        """Switch mode, re-selecting if the current compound is not listed."""
        self.mode = Category(mode)
        self._ensure_selection_in_mode()
        return self.session.select_compound(self.selected_id)

    def select(self, compound_id: str) -> asyncio.Task | None:
        """Select a compound listed in the current mode.

        Raises:
            KeyError: If *compound_id* is not listed in the current mode.
        """
        if compound_id not in {entry.id for entry in self.entries}:
            raise KeyError(
                f"{compound_id!r} is not listed in {self.mode.value} mode"
            )
        self.selected_id = compound_id
        return self.session.select_compound(compound_id)

    def toggle_spinning(self) -> bool:
        """Flip the rotation state and return the new value."""
        self.spinning = not self.spinning
        self.session.set_spinning(self.spinning)
        return self.spinning

    def status_message(self) -> str | None:
        """Overlay text for the viewer, or ``None`` when a structure is shown."""
        if self.session.lifecycle is Lifecycle.ERROR:
            return SURFACE_FAILED_MESSAGE
        state = self.session.load_state_for(self.selected_id)
        if state is LoadState.LOAD_FAILED:
            return LOAD_FAILED_MESSAGE
        if (
            self.session.lifecycle is not Lifecycle.READY
            or self.session.rendered_compound_id != self.selected_id
        ):
            return LOADING_MESSAGE
        return None
