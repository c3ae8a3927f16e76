"""Probe every catalog mirror concurrently and rank by latency."""

import asyncio
from collections.abc import Iterable

from ...utils.get_logger import get_logger
from ..registry.RegistryCatalog import RegistryCatalog
from .LatencyProber import LatencyProber
from .ProbeResult import ProbeResult
from .Prober import Prober
from .RankingResult import RankingResult

logger = get_logger("mirror")


def sort_results(results: Iterable[ProbeResult]) -> list[ProbeResult]:
    """Successes by ascending latency, then failures in catalog order."""
    return sorted(results, key=lambda r: (not r.ok, r.elapsed_ms if r.ok else 0))


async def probe_many(prober: Prober, targets: list[str], timeout_ms: int) -> list[ProbeResult]:
    """Launch all probes together and wait for every one of them."""
    outcomes = await asyncio.gather(*(prober.probe(t, timeout_ms) for t in targets), return_exceptions=True)
    results: list[ProbeResult] = []
    for target, outcome in zip(targets, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("Probe of %s raised %r", target, outcome)
            results.append(ProbeResult.failure(target, str(outcome) or type(outcome).__name__))
        else:
            results.append(outcome)
    return results


async def rank_all(catalog: RegistryCatalog, timeout_ms: int, prober: Prober | None = None) -> RankingResult:
    """Probe all non-custom catalog entries and recommend the fastest.

    Falls back to the catalog's first entry when no probe succeeds.
    """
    targets = catalog.probe_targets()
    if prober is None:
        async with LatencyProber() as owned:
            results = await probe_many(owned, targets, timeout_ms)
    else:
        results = await probe_many(prober, targets, timeout_ms)

    ranked = sort_results(results)
    if ranked and ranked[0].ok:
        recommended = ranked[0].target
    else:
        recommended = catalog.default_address
        logger.warning("No mirror answered; falling back to %s", recommended)

    return RankingResult(results=ranked, recommended=recommended, custom=catalog.custom_entry())
