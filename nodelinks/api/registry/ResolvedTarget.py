"""Result of resolving raw mirror input against the catalog."""

from dataclasses import dataclass

from .TargetKind import TargetKind


@dataclass(frozen=True)
class ResolvedTarget:
    """Tagged resolution result; ``address`` is only meaningful for ADDRESS."""

    kind: TargetKind
    address: str = ""

    @classmethod
    def all(cls) -> "ResolvedTarget":
        return cls(TargetKind.ALL)

    @classmethod
    def custom(cls) -> "ResolvedTarget":
        return cls(TargetKind.CUSTOM)

    @classmethod
    def of(cls, address: str) -> "ResolvedTarget":
        return cls(TargetKind.ADDRESS, address)

    @property
    def is_address(self) -> bool:
        return self.kind is TargetKind.ADDRESS
