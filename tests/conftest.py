"""Shared test fixtures and engine doubles for linstead."""

from __future__ import annotations

import asyncio

import pytest

from linstead.model import (
    AtomRecord,
    Category,
    CompoundDescriptor,
    Element,
    FluorinationLevel,
    ProceduralSource,
    Provenance,
    RemoteSource,
)

ZN_N4 = [
    AtomRecord(Element.ZINC, 0.0, 0.0, 0.0),
    AtomRecord(Element.NITROGEN, 2.0, 0.0, 0.0),
    AtomRecord(Element.NITROGEN, 0.0, 2.0, 0.0),
    AtomRecord(Element.NITROGEN, -2.0, 0.0, 0.0),
    AtomRecord(Element.NITROGEN, 0.0, -2.0, 0.0),
]


def sdf_text(atoms: list[AtomRecord], name: str = "test") -> str:
    """Minimal MDL V2000 molfile holding *atoms* and no bonds."""
    lines = [name, "  linstead-tests", ""]
    lines.append(f"{len(atoms):>3}  0  0  0  0  0  0  0  0  0999 V2000")
    for atom in atoms:
        lines.append(
            f"{atom.x:10.4f}{atom.y:10.4f}{atom.z:10.4f} "
            f"{atom.element.value:<3} 0  0  0  0  0  0  0  0  0  0  0  0"
        )
    lines.append("M  END")
    lines.append("$$$$")
    return "\n".join(lines) + "\n"


# ---- Rendering engine doubles ----


class FakeSurface:
    """Records every call so tests can assert on engine traffic."""

    def __init__(self, container, options):
        self.container = container
        self.options = options
        self.calls: list[tuple] = []
        self.models: list[tuple[str, str]] = []
        self.styles: dict = {}
        self.spin_state: tuple[str | None, float] = (None, 0.0)
        self.disposed = False
        self.calls_after_dispose: list[tuple] = []

    def _record(self, *call):
        self.calls.append(call)
        if self.disposed:
            self.calls_after_dispose.append(call)

    def add_model(self, data, fmt):
        self._record("add_model", fmt)
        self.models.append((data, fmt))

    def set_style(self, selector, style):
        self._record("set_style", selector.get("elem"))
        self.styles[selector.get("elem")] = style

    def remove_all_models(self):
        self._record("remove_all_models")
        self.models.clear()

    def zoom_to(self):
        self._record("zoom_to")

    def render(self):
        self._record("render")

    def spin(self, axis, rate=0.0):
        self._record("spin", axis, rate)
        self.spin_state = (axis, rate)

    def resize(self):
        self._record("resize")

    def dispose(self):
        self._record("dispose")
        self.disposed = True

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


class FakeSurfaceFactory:
    """Surface factory that remembers its surfaces, or fails on demand."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.surfaces: list[FakeSurface] = []

    def __call__(self, container, options):
        if self.fail:
            raise RuntimeError("no hardware-accelerated backend")
        surface = FakeSurface(container, options)
        self.surfaces.append(surface)
        return surface

    @property
    def surface(self) -> FakeSurface:
        return self.surfaces[-1]


class FakeHandle:
    def __init__(self, observer):
        self.observer = observer
        self.disconnected = False

    def disconnect(self):
        self.disconnected = True
        self.observer.callbacks.clear()


class FakeObserver:
    """Container observer whose size changes are fired by the test."""

    def __init__(self):
        self.callbacks = []
        self.handles: list[FakeHandle] = []

    def observe(self, container, callback):
        self.callbacks.append(callback)
        handle = FakeHandle(self)
        self.handles.append(handle)
        return handle

    def fire(self):
        for callback in list(self.callbacks):
            callback()


class ControlledStore:
    """Structure store whose fetches complete only when the test says so."""

    def __init__(self):
        self.fetches: list[str] = []
        self._waiters: dict[str, list[asyncio.Future]] = {}

    async def fetch(self, locator: str) -> str:
        self.fetches.append(locator)
        future = asyncio.get_running_loop().create_future()
        self._waiters.setdefault(locator, []).append(future)
        return await future

    def complete(self, locator: str, text: str) -> None:
        for future in self._waiters.pop(locator, []):
            if not future.done():
                future.set_result(text)

    def fail(self, locator: str, exc: BaseException) -> None:
        for future in self._waiters.pop(locator, []):
            if not future.done():
                future.set_exception(exc)


class StaticStore:
    """Structure store serving fixed text, or raising for missing locators."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.fetches: list[str] = []

    async def fetch(self, locator: str) -> str:
        self.fetches.append(locator)
        try:
            return self.files[locator]
        except KeyError:
            raise FileNotFoundError(locator) from None


async def _settle(n: int = 5) -> None:
    """Let the event loop run pending callbacks."""
    for _ in range(n):
        await asyncio.sleep(0)


# ---- Compounds ----


def _procedural(level: FluorinationLevel) -> CompoundDescriptor:
    return CompoundDescriptor(
        id=f"P{level.name}",
        category=Category.MONOMER,
        provenance=Provenance.DERIVED,
        display_label=f"{level.name} procedural",
        formula="",
        source=ProceduralSource(level),
    )


def _remote(compound_id: str, locator: str) -> CompoundDescriptor:
    return CompoundDescriptor(
        id=compound_id,
        category=Category.MONOMER,
        provenance=Provenance.DIRECT,
        display_label=compound_id,
        formula="",
        source=RemoteSource(locator),
    )


@pytest.fixture
def test_compounds():
    """Procedural compounds for every level plus two remote compounds."""
    return (
        *(_procedural(level) for level in FluorinationLevel),
        _remote("A", "/structures/A.sdf"),
        _remote("B", "/structures/B.sdf"),
    )


@pytest.fixture
def factory():
    return FakeSurfaceFactory()


@pytest.fixture
def observer():
    return FakeObserver()


@pytest.fixture
def failing_factory():
    """Surface factory whose backend cannot be created."""
    return FakeSurfaceFactory(fail=True)


@pytest.fixture
def store():
    return ControlledStore()


@pytest.fixture
def static_store():
    """Store serving whatever a test puts in its ``files`` mapping."""
    return StaticStore({})


@pytest.fixture
def settle():
    """Coroutine function that lets the event loop run pending callbacks."""
    return _settle


@pytest.fixture
def zn_atoms():
    """A zinc atom with four coordinating nitrogens."""
    return list(ZN_N4)


@pytest.fixture
def make_sdf():
    """Function building a minimal V2000 molfile from atom records."""
    return sdf_text


@pytest.fixture
def zn_sdf():
    return sdf_text(ZN_N4)
