"""Protocol for anything that can probe a mirror address."""

from typing import Protocol

from .ProbeResult import ProbeResult


class Prober(Protocol):
    async def probe(self, address: str, timeout_ms: int) -> ProbeResult: ...
