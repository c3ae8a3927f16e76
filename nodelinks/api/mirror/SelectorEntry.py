"""One row of the interactive mirror list."""

from dataclasses import dataclass

from .ProbeResult import ProbeResult


@dataclass(frozen=True)
class SelectorEntry:
    name: str
    address: str
    result: ProbeResult | None

    @property
    def is_custom(self) -> bool:
        return self.address == ""

    def status(self) -> str:
        if self.is_custom:
            return "custom address"
        if self.result is None or not self.result.ok:
            return "unreachable"
        return f"{self.result.elapsed_ms}ms"
