"""Tests for the HTTP and local structure stores."""

import asyncio
import threading
from pathlib import Path

import pytest
import requests

from linstead.config import ViewerConfig
from linstead.stores import HttpStructureStore, LocalStructureStore


class _Response:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class _Session:
    def __init__(self, response):
        self.response = response
        self.requests = []
        self.closed = False

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        return self.response

    def close(self):
        self.closed = True


class TestHttpStructureStore:
    def test_fetch_joins_base_url(self):
        session = _Session(_Response("payload"))
        store = HttpStructureStore(
            "https://example.org/app/", timeout=5.0, session=session,
        )
        text = asyncio.run(store.fetch("structures/F16.sdf"))
        assert text == "payload"
        assert session.requests == [
            ("https://example.org/app/structures/F16.sdf", 5.0),
        ]

    def test_absolute_locator_without_base(self):
        store = HttpStructureStore(session=_Session(_Response("")))
        assert store.url_for("https://a.org/x.sdf") == "https://a.org/x.sdf"

    def test_root_relative_locator(self):
        store = HttpStructureStore("https://example.org/app/", session=_Session(None))
        assert store.url_for("/structures/H16.sdf") == (
            "https://example.org/structures/H16.sdf"
        )

    def test_http_error_propagates(self):
        store = HttpStructureStore(session=_Session(_Response("", status=404)))
        with pytest.raises(requests.HTTPError, match="404"):
            asyncio.run(store.fetch("https://example.org/missing.sdf"))

    def test_from_config(self):
        session = _Session(_Response("x"))
        config = ViewerConfig(base_url="https://example.org/", fetch_timeout=2.0)
        store = HttpStructureStore.from_config(config, session=session)
        asyncio.run(store.fetch("/structures/F64.sdf"))
        assert session.requests == [("https://example.org/structures/F64.sdf", 2.0)]

    def test_close(self):
        session = _Session(None)
        HttpStructureStore(session=session).close()
        assert session.closed


class TestLocalStructureStore:
    def test_fetch_strips_leading_slash(self, tmp_path):
        (tmp_path / "structures").mkdir()
        (tmp_path / "structures" / "F16.sdf").write_text("data")
        store = LocalStructureStore(tmp_path)
        assert asyncio.run(store.fetch("/structures/F16.sdf")) == "data"

    def test_read_runs_off_the_event_loop_thread(self, tmp_path, monkeypatch):
        (tmp_path / "F64.sdf").write_text("data")
        threads = []
        read_text = Path.read_text

        def recording_read_text(self, *args, **kwargs):
            threads.append(threading.current_thread())
            return read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", recording_read_text)
        store = LocalStructureStore(tmp_path)
        assert asyncio.run(store.fetch("F64.sdf")) == "data"
        assert threads and threads[0] is not threading.main_thread()

    def test_missing_file_raises(self, tmp_path):
        store = LocalStructureStore(tmp_path)
        with pytest.raises(FileNotFoundError):
            asyncio.run(store.fetch("/structures/none.sdf"))

    def test_escaping_root_raises(self, tmp_path):
        store = LocalStructureStore(tmp_path / "public")
        with pytest.raises(ValueError, match="escapes"):
            store.path_for("../secret.sdf")
