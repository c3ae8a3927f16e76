"""HTTP latency prober for registry mirrors."""

import asyncio
import time
from types import TracebackType

import aiohttp

from ...constants import DEFAULT_MIRROR_TIMEOUT_MS, MAX_REDIRECTS
from ...utils.get_logger import get_logger
from .build_probe_url import build_probe_url
from .ProbeResult import ProbeResult

logger = get_logger("mirror")

USER_AGENT = "nodelinks mirror probe"


class LatencyProber:
    """Issues HEAD requests and measures time to the response headers.

    Use as an async context manager; all probes share one ClientSession.
    Certificate validation is disabled because some mirrors serve
    non-standard certificates. Probes are never retried here.
    """

    def __init__(self, session: aiohttp.ClientSession | None = None):
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "LatencyProber":
        if self._session is None:
            self._session = aiohttp.ClientSession(headers={"User-Agent": USER_AGENT})
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def probe(self, address: str, timeout_ms: int = DEFAULT_MIRROR_TIMEOUT_MS) -> ProbeResult:
        if self._session is None:
            raise RuntimeError("LatencyProber must be used inside 'async with'")

        url = build_probe_url(address)
        start = time.monotonic()
        try:
            async with self._session.head(
                url,
                allow_redirects=True,
                max_redirects=MAX_REDIRECTS,
                ssl=False,
                timeout=aiohttp.ClientTimeout(total=timeout_ms / 1000),
            ) as resp:
                elapsed_ms = int((time.monotonic() - start) * 1000)
                status = resp.status
        except asyncio.TimeoutError:
            logger.info("Probe of %s timed out after %dms", url, timeout_ms)
            return ProbeResult.failure(address, f"Request timed out after {timeout_ms}ms")
        except aiohttp.ClientError as e:
            logger.info("Probe of %s failed: %s", url, e)
            return ProbeResult.failure(address, str(e) or type(e).__name__)
        except (OSError, ValueError) as e:
            logger.info("Probe of %s failed: %s", url, e)
            return ProbeResult.failure(address, str(e) or type(e).__name__)

        logger.info("Probe of %s answered %s in %dms", url, status, elapsed_ms)
        return ProbeResult.success(address, elapsed_ms, status)
