"""Outcome of a single latency probe."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProbeResult:
    """Latency measurement for one address.

    Exactly one of ``elapsed_ms`` and ``error`` is set.
    """

    target: str
    elapsed_ms: int | None = None
    status_code: int | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.elapsed_ms is None) == (self.error is None):
            raise ValueError("ProbeResult needs exactly one of elapsed_ms and error")

    @classmethod
    def success(cls, target: str, elapsed_ms: int, status_code: int | None = None) -> "ProbeResult":
        return cls(target=target, elapsed_ms=elapsed_ms, status_code=status_code)

    @classmethod
    def failure(cls, target: str, error: str) -> "ProbeResult":
        return cls(target=target, error=error or "network error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
