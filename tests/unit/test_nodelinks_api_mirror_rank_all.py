"""Unit tests for nodelinks.api.mirror.rank_all."""

import asyncio

import pytest

from nodelinks.api.mirror.ProbeResult import ProbeResult
from nodelinks.api.mirror.rank_all import probe_many, rank_all, sort_results
from tests.conftest import FakeProber, minimal_catalog

pytestmark = pytest.mark.mirror


def test_m1_m2_custom_scenario():
    catalog = minimal_catalog()
    prober = FakeProber({"m1.example": 50})

    ranking = asyncio.run(rank_all(catalog, 1000, prober))

    assert [r.target for r in ranking.results] == ["m1.example", "m2.example"]
    assert ranking.results[0].elapsed_ms == 50
    assert ranking.results[1].error == "connection refused"
    assert ranking.recommended == "m1.example"
    assert ranking.custom.name == "custom"
    assert sorted(prober.calls) == [("m1.example", 1000), ("m2.example", 1000)]

    entries = ranking.entries(catalog)
    assert [e.name for e in entries] == ["m1", "m2", "custom"]
    assert [e.status() for e in entries] == ["50ms", "unreachable", "custom address"]


def test_one_result_per_catalog_address(catalog):
    prober = FakeProber({})
    ranking = asyncio.run(rank_all(catalog, 50, prober))
    assert len(ranking.results) == len(catalog.probe_targets())


def test_failures_follow_successes_in_catalog_order(catalog):
    targets = catalog.probe_targets()
    prober = FakeProber({targets[3]: 300, targets[1]: 120})

    ranking = asyncio.run(rank_all(catalog, 1000, prober))

    assert [r.target for r in ranking.results] == [targets[1], targets[3], targets[0], targets[2]]
    assert [r.ok for r in ranking.results] == [True, True, False, False]


def test_no_reachable_mirror_recommends_default(catalog):
    ranking = asyncio.run(rank_all(catalog, 1000, FakeProber({})))
    assert ranking.recommended == catalog.default_address
    assert not any(r.ok for r in ranking.results)


def test_sort_results_is_stable_for_equal_latency():
    results = [ProbeResult.success("a", 10), ProbeResult.failure("b", "x"), ProbeResult.success("c", 10)]
    assert [r.target for r in sort_results(results)] == ["a", "c", "b"]


def test_probe_exception_becomes_failure():
    class ExplodingProber:
        async def probe(self, address, timeout_ms):
            if address == "bad":
                raise RuntimeError("boom")
            return ProbeResult.success(address, 5)

    results = asyncio.run(probe_many(ExplodingProber(), ["good", "bad"], 100))

    assert results[0].ok
    assert results[1].error == "boom"
