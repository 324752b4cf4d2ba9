"""Turn compound descriptors into renderable structure payloads."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from linstead.errors import StructureLoadError
from linstead.geometry import generate
from linstead.model import (
    AtomRecord,
    CompoundDescriptor,
    FluorinationLevel,
    ProceduralSource,
    RemoteSource,
)
from linstead.parser import format_xyz, parse_structure
from linstead.stores import StructureStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructurePayload:
    """Structure text in an exchange format the rendering surface accepts.

    Attributes:
        data: The structure text.
        format: Exchange format name, ``"xyz"`` or ``"sdf"``.
    """

    data: str
    format: str

    def atoms(self) -> list[AtomRecord]:
        """Parse the payload into atom records.

        Raises:
            ValueError: If the text is malformed.
        """
        return parse_structure(self.data, self.format)


def generated_payload(
    level: FluorinationLevel,
    generator: Callable[[FluorinationLevel], list[AtomRecord]] = generate,
) -> StructurePayload:
    """Generate the structure for *level* and serialise it as XYZ."""
    atoms = generator(level)
    return StructurePayload(
        format_xyz(atoms, comment=f"procedural {FluorinationLevel(level).name}"),
        "xyz",
    )


class StructureResolver:
    """Resolve descriptors to payloads, caching results per compound id.

    A resolver belongs to one viewer session and its cache lives only as
    long as that session.  Concurrent requests for the same compound
    share one in-flight future, so a remote structure is fetched at
    most once while a request is pending.  Failed fetches are evicted
    from the cache so that a later request tries again; nothing is
    retried automatically.

    Args:
        store: Store used for remote sources.
        timeout: Seconds to wait for a remote fetch before failing,
            or ``None`` to wait indefinitely.
        generator: Geometry generator for procedural sources.
    """

    def __init__(
        self,
        store: StructureStore,
        *,
        timeout: float | None = None,
        generator: Callable[[FluorinationLevel], list[AtomRecord]] = generate,
    ) -> None:
        self.store = store
        self.timeout = timeout
        self.generator = generator
        self._cache: dict[str, asyncio.Future[StructurePayload]] = {}

    def __contains__(self, compound_id: str) -> bool:
        return compound_id in self._cache

    def resolve(
        self, descriptor: CompoundDescriptor,
    ) -> asyncio.Future[StructurePayload]:
        """Start (or join) resolution of *descriptor*.

        Must be called with a running event loop.  Procedural sources
        are generated immediately and returned as an already-completed
        future; remote sources are fetched in a task.

        Returns:
            A future resolving to the payload, or failing with
            :class:`StructureLoadError`.
        """
        cached = self._cache.get(descriptor.id)
        if cached is not None and not _failed(cached):
            logger.debug("Cache hit for %s", descriptor.id)
            return cached

        loop = asyncio.get_running_loop()
        source = descriptor.source
        future: asyncio.Future[StructurePayload]
        if isinstance(source, ProceduralSource):
            future = loop.create_future()
            future.set_result(generated_payload(source.level, self.generator))
            logger.debug("Generated %s at level %s", descriptor.id, source.level.name)
        elif isinstance(source, RemoteSource):
            future = loop.create_task(self._fetch(source))
            future.add_done_callback(partial(self._evict_if_failed, descriptor.id))
        else:
            raise TypeError(f"Unsupported structure source: {source!r}")

        self._cache[descriptor.id] = future
        return future

    def cached_payload(self, compound_id: str) -> StructurePayload | None:
        """The payload for *compound_id* if it has already resolved successfully."""
        future = self._cache.get(compound_id)
        if future is None or not future.done() or _failed(future):
            return None
        return future.result()

    def clear(self) -> None:
        """Cancel in-flight fetches and drop every cached entry."""
        for future in self._cache.values():
            if not future.done():
                future.cancel()
        self._cache.clear()

    async def _fetch(self, source: RemoteSource) -> StructurePayload:
        locator = source.locator
        try:
            if self.timeout is None:
                text = await self.store.fetch(locator)
            else:
                text = await asyncio.wait_for(
                    self.store.fetch(locator), self.timeout,
                )
            payload = StructurePayload(text, source.format)
            payload.atoms()
        except Exception as exc:
            raise StructureLoadError(locator, exc) from exc
        logger.debug("Fetched %s", locator)
        return payload

    def _evict_if_failed(
        self, compound_id: str, future: asyncio.Future[StructurePayload],
    ) -> None:
        if _failed(future) and self._cache.get(compound_id) is future:
            del self._cache[compound_id]


def _failed(future: asyncio.Future) -> bool:
    """Whether a completed *future* was cancelled or raised."""
    return future.done() and (future.cancelled() or future.exception() is not None)
