"""Remote structure stores: where pre-authored structure files come from."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import urljoin

import requests

from linstead.config import ViewerConfig

logger = logging.getLogger(__name__)


class StructureStore(Protocol):
    """Anything that can fetch structure text by locator."""

    async def fetch(self, locator: str) -> str:
        """Return the structure text stored at *locator*.

        Implementations raise on transport failure or a non-success
        status; they never retry.
        """
        ...


class HttpStructureStore:
    """Fetch structures over HTTP with :mod:`requests`.

    The blocking request runs in a worker thread so the event loop
    stays responsive; only the returned text crosses back to the loop.

    Args:
        base_url: Prefix joined to relative locators, or ``None`` to
            require absolute URLs.
        timeout: Per-request timeout in seconds passed to
            :mod:`requests`.
        session: Optional :class:`requests.Session` to reuse
            connections.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_config(
        cls, config: ViewerConfig, session: requests.Session | None = None,
    ) -> HttpStructureStore:
        """Build a store from the ``base_url`` and ``fetch_timeout`` settings."""
        return cls(config.base_url, timeout=config.fetch_timeout, session=session)

    def url_for(self, locator: str) -> str:
        if self.base_url is None:
            return locator
        return urljoin(self.base_url, locator)

    def _get(self, url: str) -> str:
        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    async def fetch(self, locator: str) -> str:
        url = self.url_for(locator)
        logger.debug("GET %s", url)
        return await asyncio.to_thread(self._get, url)

    def close(self) -> None:
        self._session.close()


class LocalStructureStore:
    """Read structures from a directory, treating locators as relative paths.

    Args:
        root: Directory that locators are resolved against.  A leading
            ``/`` on a locator is ignored.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    def path_for(self, locator: str) -> Path:
        """Resolve *locator* inside :attr:`root`.

        Raises:
            ValueError: If the locator escapes the root directory.
        """
        path = (self.root / locator.lstrip("/")).resolve()
        if not path.is_relative_to(self.root):
            raise ValueError(f"locator {locator!r} escapes {self.root}")
        return path

    async def fetch(self, locator: str) -> str:
        path = self.path_for(locator)
        logger.debug("Reading %s", path)
        return await asyncio.to_thread(path.read_text)
