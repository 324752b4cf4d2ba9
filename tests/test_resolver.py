"""Tests for StructureResolver — generation, fetching and caching."""

import asyncio

import pytest

from linstead.errors import StructureLoadError
from linstead.geometry import generate
from linstead.model import (
    Category,
    CompoundDescriptor,
    FluorinationLevel,
    Provenance,
    RemoteSource,
)
from linstead.parser import format_xyz, parse_xyz
from linstead.resolver import StructurePayload, StructureResolver, generated_payload


def _by_id(compounds, compound_id):
    return next(c for c in compounds if c.id == compound_id)


class TestGeneratedPayload:
    def test_xyz_matches_generator(self):
        payload = generated_payload(FluorinationLevel.F64)
        assert payload.format == "xyz"
        assert len(parse_xyz(payload.data)) == len(generate(FluorinationLevel.F64))

    def test_atoms(self):
        payload = generated_payload(FluorinationLevel.F16)
        assert len(payload.atoms()) == 41


class TestProceduralResolution:
    def test_already_resolved(self, test_compounds, static_store):
        async def scenario():
            resolver = StructureResolver(static_store)
            future = resolver.resolve(_by_id(test_compounds, "PF40"))
            assert future.done()
            return await future

        payload = asyncio.run(scenario())
        assert payload == generated_payload(FluorinationLevel.F40)

    def test_cached(self, test_compounds, static_store):
        async def scenario():
            resolver = StructureResolver(static_store)
            descriptor = _by_id(test_compounds, "PF52")
            return resolver.resolve(descriptor) is resolver.resolve(descriptor)

        assert asyncio.run(scenario())


class TestRemoteResolution:
    def test_fetch_and_parse(self, test_compounds, zn_sdf, static_store):
        store = static_store
        store.files["/structures/A.sdf"] = zn_sdf

        async def scenario():
            resolver = StructureResolver(store)
            return await resolver.resolve(_by_id(test_compounds, "A"))

        payload = asyncio.run(scenario())
        assert payload == StructurePayload(zn_sdf, "sdf")
        assert store.fetches == ["/structures/A.sdf"]

    def test_concurrent_requests_share_one_fetch(
        self, test_compounds, zn_sdf, store, settle,
    ):
        async def scenario():
            resolver = StructureResolver(store)
            descriptor = _by_id(test_compounds, "A")
            futures = [resolver.resolve(descriptor) for _ in range(3)]
            await settle()
            store.complete("/structures/A.sdf", zn_sdf)
            return await asyncio.gather(*futures)

        results = asyncio.run(scenario())
        assert store.fetches == ["/structures/A.sdf"]
        assert all(r.data == zn_sdf for r in results)

    def test_transport_failure_wrapped(self, test_compounds, static_store):
        async def scenario():
            resolver = StructureResolver(static_store)
            await resolver.resolve(_by_id(test_compounds, "A"))

        with pytest.raises(StructureLoadError) as excinfo:
            asyncio.run(scenario())
        assert excinfo.value.locator == "/structures/A.sdf"
        assert isinstance(excinfo.value.cause, FileNotFoundError)

    def test_malformed_payload_wrapped(self, test_compounds, static_store):
        static_store.files["/structures/A.sdf"] = "junk"

        async def scenario():
            resolver = StructureResolver(static_store)
            await resolver.resolve(_by_id(test_compounds, "A"))

        with pytest.raises(StructureLoadError, match="too short"):
            asyncio.run(scenario())

    def test_body_naming_a_local_file_is_rejected(
        self, tmp_path, static_store, zn_atoms,
    ):
        local = tmp_path / "local.xyz"
        local.write_text(format_xyz(zn_atoms))
        static_store.files["/structures/A.xyz"] = str(local)
        descriptor = CompoundDescriptor(
            id="A",
            category=Category.MONOMER,
            provenance=Provenance.DIRECT,
            display_label="A",
            formula="",
            source=RemoteSource("/structures/A.xyz"),
        )

        async def scenario():
            await StructureResolver(static_store).resolve(descriptor)

        with pytest.raises(StructureLoadError, match="count line"):
            asyncio.run(scenario())

    def test_timeout(self, test_compounds, store):
        async def scenario():
            resolver = StructureResolver(store, timeout=0.01)
            await resolver.resolve(_by_id(test_compounds, "A"))

        with pytest.raises(StructureLoadError) as excinfo:
            asyncio.run(scenario())
        assert isinstance(excinfo.value.cause, asyncio.TimeoutError)

    def test_failure_evicted_and_retry_fetches_again(
        self, test_compounds, zn_sdf, static_store, settle,
    ):
        store = static_store

        async def scenario():
            resolver = StructureResolver(store)
            descriptor = _by_id(test_compounds, "A")
            with pytest.raises(StructureLoadError):
                await resolver.resolve(descriptor)
            await settle()
            assert "A" not in resolver
            store.files["/structures/A.sdf"] = zn_sdf
            return await resolver.resolve(descriptor)

        assert asyncio.run(scenario()).data == zn_sdf
        assert len(store.fetches) == 2


class TestCache:
    def test_cached_payload(self, test_compounds, zn_sdf, store, settle):
        async def scenario():
            resolver = StructureResolver(store)
            future = resolver.resolve(_by_id(test_compounds, "A"))
            assert resolver.cached_payload("A") is None
            await settle()
            store.complete("/structures/A.sdf", zn_sdf)
            await future
            return resolver.cached_payload("A")

        assert asyncio.run(scenario()).data == zn_sdf

    def test_clear_cancels_in_flight(self, test_compounds, store, settle):
        async def scenario():
            resolver = StructureResolver(store)
            future = resolver.resolve(_by_id(test_compounds, "A"))
            await settle()
            resolver.clear()
            await settle()
            return future, resolver

        future, resolver = asyncio.run(scenario())
        assert future.cancelled()
        assert "A" not in resolver
