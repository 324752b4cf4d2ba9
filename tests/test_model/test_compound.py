"""Tests for compound descriptors and structure sources."""

import dataclasses

import pytest

from linstead.model import (
    Category,
    CompoundDescriptor,
    FluorinationLevel,
    ProceduralSource,
    Provenance,
    RemoteSource,
)


def _descriptor(source):
    return CompoundDescriptor(
        id="X",
        category=Category.MONOMER,
        provenance=Provenance.DIRECT,
        display_label="X",
        formula="C32F16N8Zn",
        source=source,
    )


class TestRemoteSource:
    def test_kind(self):
        assert RemoteSource("/structures/F16.sdf").kind == "remote"

    def test_format_from_suffix(self):
        assert RemoteSource("/structures/F16.sdf").format == "sdf"
        assert RemoteSource("https://example.org/a.XYZ").format == "xyz"

    def test_format_ignores_query(self):
        assert RemoteSource("/structures/F16.xyz?v=2").format == "xyz"

    def test_empty_locator_raises(self):
        with pytest.raises(ValueError, match="locator"):
            RemoteSource("")


class TestProceduralSource:
    def test_kind(self):
        assert ProceduralSource(FluorinationLevel.F40).kind == "procedural"


class TestCompoundDescriptor:
    def test_frozen(self):
        descriptor = _descriptor(RemoteSource("/a.sdf"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.id = "Y"  # type: ignore[misc]

    def test_is_procedural(self):
        assert _descriptor(ProceduralSource(FluorinationLevel.F52)).is_procedural
        assert not _descriptor(RemoteSource("/a.sdf")).is_procedural

    def test_empty_id_raises(self):
        with pytest.raises(ValueError, match="id"):
            dataclasses.replace(_descriptor(RemoteSource("/a.sdf")), id="")
