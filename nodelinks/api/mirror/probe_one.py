"""Probe a single address."""

from .LatencyProber import LatencyProber
from .ProbeResult import ProbeResult
from .Prober import Prober


async def probe_one(address: str, timeout_ms: int, prober: Prober | None = None) -> ProbeResult:
    if prober is not None:
        return await prober.probe(address, timeout_ms)
    async with LatencyProber() as owned:
        return await owned.probe(address, timeout_ms)
