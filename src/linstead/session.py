"""Viewer session: one rendering surface and the structures shown on it.

The session is driven from a single asyncio event loop.  Remote
structures are awaited in tasks; every completion re-checks that the
session is still mounted and that its selection is still current
before touching the surface, so a slow, superseded or post-unmount
resolution can never overwrite newer state.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from linstead.config import ViewerConfig
from linstead.engine import ContainerObserver, ObserverHandle, RenderSurface, SurfaceFactory
from linstead.errors import SurfaceInitError, ViewerStateError
from linstead.model import CompoundDescriptor
from linstead.registry import COMPOUNDS
from linstead.resolver import StructurePayload, StructureResolver
from linstead.stores import StructureStore

logger = logging.getLogger(__name__)


class Lifecycle(StrEnum):
    """Session lifecycle.  ``DISPOSED`` is terminal."""

    BOOTING = "booting"
    READY = "ready"
    ERROR = "error"
    DISPOSED = "disposed"


class LoadState(StrEnum):
    """Per-compound structure loading state."""

    NO_STRUCTURE_LOADED = "no_structure_loaded"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"


class ViewerSession:
    """Owns one rendering surface bound to a container.

    Surface failures put the whole session in :attr:`Lifecycle.ERROR`;
    structure failures only mark that compound as
    :attr:`LoadState.LOAD_FAILED` and leave the current rendering in
    place.  Neither is raised to the caller.

    Args:
        surface_factory: Creates the rendering surface at mount time.
        store: Store for remote structures.
        observer: Optional container observer; when given, size changes
            call :meth:`resize`.
        config: Viewer settings.  Defaults to :class:`ViewerConfig()`.
        compounds: Compounds that may be selected.  Defaults to the
            registry catalogue.
    """

    def __init__(
        self,
        surface_factory: SurfaceFactory,
        store: StructureStore,
        *,
        observer: ContainerObserver | None = None,
        config: ViewerConfig | None = None,
        compounds: Iterable[CompoundDescriptor] = COMPOUNDS,
    ) -> None:
        self.config = config if config is not None else ViewerConfig()
        self.lifecycle = Lifecycle.BOOTING
        self.active_compound_id: str | None = None
        self.spinning = False
        self.surface_error: SurfaceInitError | None = None

        self._surface_factory = surface_factory
        self._observer = observer
        self._observer_handle: ObserverHandle | None = None
        self._surface: RenderSurface | None = None
        self._container: Any = None
        self._compounds = {c.id: c for c in compounds}
        self._resolver = StructureResolver(store, timeout=self.config.fetch_timeout)
        self._load_states: dict[str, LoadState] = {}
        self._load_errors: dict[str, BaseException] = {}
        self._pending: set[asyncio.Task] = set()
        self._token = 0
        self._rendered_id: str | None = None

    # ---- Observable state ----

    @property
    def load_state(self) -> LoadState:
        """Load state of the active compound."""
        if self.active_compound_id is None:
            return LoadState.NO_STRUCTURE_LOADED
        return self.load_state_for(self.active_compound_id)

    def load_state_for(self, compound_id: str) -> LoadState:
        return self._load_states.get(compound_id, LoadState.NO_STRUCTURE_LOADED)

    def load_error(self, compound_id: str) -> BaseException | None:
        """The error from the last failed load of *compound_id*, if any."""
        return self._load_errors.get(compound_id)

    @property
    def rendered_compound_id(self) -> str | None:
        """The compound whose geometry is currently on the surface."""
        return self._rendered_id

    @property
    def pending(self) -> frozenset[asyncio.Task]:
        """Resolution tasks that have not completed."""
        return frozenset(self._pending)

    # ---- Commands ----

    def mount(self, container: Any) -> None:
        """Create the rendering surface for *container*.

        Mounting a session that is already ready is a no-op.  A session
        in the error state may be mounted again.

        Raises:
            ViewerStateError: If the session has been unmounted.
        """
        if self.lifecycle is Lifecycle.DISPOSED:
            raise ViewerStateError("cannot mount a session after unmount")
        if self.lifecycle is Lifecycle.READY:
            logger.debug("Session already mounted; ignoring mount")
            return

        try:
            surface = self._surface_factory(container, self.config.surface_options())
        except Exception as exc:
            error = SurfaceInitError(f"could not create rendering surface: {exc}")
            error.__cause__ = exc
            self.surface_error = error
            self.lifecycle = Lifecycle.ERROR
            logger.warning("Rendering surface failed to initialise", exc_info=exc)
            return

        self._surface = surface
        self._container = container
        self.surface_error = None
        if self._observer is not None:
            self._observer_handle = self._observer.observe(container, self.resize)
        self.lifecycle = Lifecycle.READY
        logger.info("Viewer session ready")

        if self.spinning:
            surface.spin(self.config.spin_axis, self.config.spin_rate)
        if self.active_compound_id is not None:
            payload = self._resolver.cached_payload(self.active_compound_id)
            if payload is not None:
                self._render(self.active_compound_id, payload)

    def select_compound(self, compound_id: str) -> asyncio.Task | None:
        """Make *compound_id* the active compound and start loading it.

        Selecting the active compound again is a no-op unless its last
        load failed, in which case the load is retried.  Must be called
        from a running event loop.

        Returns:
            The task awaiting a remote structure, or ``None`` when the
            structure was available immediately (procedural or cached)
            or nothing needed to be done.

        Raises:
            KeyError: If *compound_id* is not a known compound.
            ViewerStateError: If the session has been unmounted.
        """
        if self.lifecycle is Lifecycle.DISPOSED:
            raise ViewerStateError("cannot select a compound after unmount")
        try:
            descriptor = self._compounds[compound_id]
        except KeyError:
            raise KeyError(f"unknown compound id: {compound_id!r}") from None

        if (
            compound_id == self.active_compound_id
            and self.load_state is not LoadState.LOAD_FAILED
        ):
            return None

        self.active_compound_id = compound_id
        self._token += 1
        token = self._token
        self._load_states[compound_id] = LoadState.LOADING

        future = self._resolver.resolve(descriptor)
        if future.done():
            self._complete(compound_id, token, future)
            return None

        task = asyncio.get_running_loop().create_task(
            self._await_resolution(compound_id, token, future),
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def set_spinning(self, spinning: bool) -> None:
        """Start or stop the continuous rotation.

        The surface keeps its accumulated orientation, so stopping and
        restarting resumes from where the structure was.

        Raises:
            ViewerStateError: If the session has been unmounted.
        """
        if self.lifecycle is Lifecycle.DISPOSED:
            raise ViewerStateError("cannot change rotation after unmount")
        spinning = bool(spinning)
        if spinning == self.spinning:
            return
        self.spinning = spinning
        if self.lifecycle is Lifecycle.READY:
            self._surface.spin(
                self.config.spin_axis if spinning else None,
                self.config.spin_rate,
            )

    def resize(self) -> None:
        """Re-fit the surface to its container and redraw.

        Safe to call at any frequency and in any state; it does nothing
        unless the session is ready.
        """
        if self.lifecycle is not Lifecycle.READY:
            return
        self._surface.resize()
        self._surface.render()

    def unmount(self) -> None:
        """Release the surface and cancel everything still pending.

        Idempotent.  After this returns no callback scheduled earlier
        can reach the surface.
        """
        if self.lifecycle is Lifecycle.DISPOSED:
            return
        self.lifecycle = Lifecycle.DISPOSED
        self._token += 1

        if self._observer_handle is not None:
            self._observer_handle.disconnect()
            self._observer_handle = None
        for task in self._pending:
            task.cancel()
        self._pending.clear()
        self._resolver.clear()

        surface, self._surface = self._surface, None
        self._container = None
        self._rendered_id = None
        if surface is not None:
            try:
                if self.spinning:
                    surface.spin(None)
                surface.remove_all_models()
            finally:
                surface.dispose()
        logger.info("Viewer session disposed")

    # ---- Internals ----

    async def _await_resolution(
        self,
        compound_id: str,
        token: int,
        future: asyncio.Future[StructurePayload],
    ) -> None:
        # wait() does not propagate cancellation of this task into the
        # shared resolver future.
        await asyncio.wait({future})
        self._complete(compound_id, token, future)

    def _complete(
        self,
        compound_id: str,
        token: int,
        future: asyncio.Future[StructurePayload],
    ) -> None:
        if self.lifecycle is Lifecycle.DISPOSED or future.cancelled():
            return

        error = future.exception()
        if error is not None:
            self._load_states[compound_id] = LoadState.LOAD_FAILED
            self._load_errors[compound_id] = error
            logger.warning("Loading %s failed: %s", compound_id, error)
            return

        self._load_states[compound_id] = LoadState.LOADED
        self._load_errors.pop(compound_id, None)
        if token != self._token:
            logger.debug("Dropping superseded structure for %s", compound_id)
            return
        if self.lifecycle is Lifecycle.READY:
            self._render(compound_id, future.result())

    def _render(self, compound_id: str, payload: StructurePayload) -> None:
        surface = self._surface
        try:
            surface.remove_all_models()
            surface.add_model(payload.data, payload.format)
            surface.set_style({}, self.config.base_style.to_engine_style())
            for element, style in self.config.element_styles.items():
                surface.set_style({"elem": element}, style.to_engine_style())
            surface.zoom_to()
            surface.render()
        except Exception as exc:
            self._rendered_id = None
            self._load_states[compound_id] = LoadState.LOAD_FAILED
            self._load_errors[compound_id] = exc
            logger.warning("Rendering %s failed", compound_id, exc_info=exc)
            return
        self._rendered_id = compound_id
        logger.debug("Rendered %s", compound_id)
