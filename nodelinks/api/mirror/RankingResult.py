"""Result of ranking all catalog mirrors."""

from dataclasses import dataclass

from ..registry.Mirror import Mirror
from ..registry.RegistryCatalog import RegistryCatalog
from .ProbeResult import ProbeResult
from .SelectorEntry import SelectorEntry


@dataclass(frozen=True)
class RankingResult:
    """Ranked probe results plus the recommendation.

    ``custom`` is never probed and is always listed after ``results``.
    """

    results: list[ProbeResult]
    recommended: str
    custom: Mirror | None = None

    def entries(self, catalog: RegistryCatalog) -> list[SelectorEntry]:
        """Ranked entries followed by the custom slot, as shown to the user."""
        items = [SelectorEntry(name=catalog.name_for(r.target), address=r.target, result=r) for r in self.results]
        if self.custom is not None:
            items.append(SelectorEntry(name=self.custom.name, address="", result=None))
        return items
