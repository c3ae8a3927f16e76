"""Ordered catalog of known registry mirrors."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError, model_validator

from ...constants import CATALOG_FILENAME
from ...utils.get_home_dir import get_home_dir
from ...utils.get_logger import get_logger
from .DEFAULT_MIRRORS import DEFAULT_MIRRORS
from .Mirror import Mirror
from .ResolvedTarget import ResolvedTarget

logger = get_logger("registry")


class RegistryCatalog(BaseModel):
    """Known mirrors in user-facing order (1-based indices on input)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mirrors: tuple[Mirror, ...]

    _alias_map: dict[str, Mirror] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_mirrors(self) -> "RegistryCatalog":
        if not self.mirrors:
            raise ValueError("Catalog must contain at least one mirror")
        if self.mirrors[0].is_custom:
            raise ValueError("First catalog entry must have an address; it is the default registry")
        seen: dict[str, str] = {}
        for mirror in self.mirrors:
            for alias in mirror.alias:
                if alias in seen:
                    raise ValueError(f"Alias '{alias}' is used by both '{seen[alias]}' and '{mirror.name}'")
                seen[alias] = mirror.name
        return self

    def model_post_init(self, __context) -> None:
        self._alias_map = {alias: mirror for mirror in self.mirrors for alias in mirror.alias}

    @classmethod
    def get_catalog_path(cls) -> Path:
        return get_home_dir(CATALOG_FILENAME)

    @classmethod
    def default(cls) -> "RegistryCatalog":
        return cls(mirrors=tuple(Mirror(**entry) for entry in DEFAULT_MIRRORS))

    @classmethod
    def load(cls, path: Path | None = None) -> "RegistryCatalog":
        """Load the catalog document, writing the default one if it is absent.

        Raises:
            ValueError: If the catalog file is not valid JSON or fails validation
        """
        path = path or cls.get_catalog_path()

        if not path.exists():
            catalog = cls.default()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(catalog.to_list(), indent=2, ensure_ascii=False), encoding="utf-8")
            logger.info("Wrote default mirror catalog to %s", path)
            return catalog

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in catalog file {path}: {e}") from e

        if not isinstance(raw, list):
            raise ValueError(f"Catalog file {path} must contain a list of mirrors")

        try:
            return cls(mirrors=tuple(Mirror(**entry) for entry in raw))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid catalog file {path}: {e}") from e

    def to_list(self) -> list[dict]:
        return [mirror.model_dump(mode="json") for mirror in self.mirrors]

    @property
    def default_address(self) -> str:
        """Address of the first catalog entry, the fallback registry."""
        return self.mirrors[0].value

    def __len__(self) -> int:
        return len(self.mirrors)

    def probe_targets(self) -> list[str]:
        """Non-empty addresses in catalog order."""
        return [m.value for m in self.mirrors if not m.is_custom]

    def custom_entry(self) -> Mirror | None:
        return next((m for m in self.mirrors if m.is_custom), None)

    def name_for(self, address: str) -> str:
        mirror = next((m for m in self.mirrors if m.value == address and not m.is_custom), None)
        return mirror.name if mirror else address

    def index_of(self, address: str) -> int | None:
        """1-based position of the entry holding ``address``."""
        for i, mirror in enumerate(self.mirrors, start=1):
            if mirror.value == address and not mirror.is_custom:
                return i
        return None

    def resolve_input(self, raw: str | None) -> ResolvedTarget:
        """Resolve user input to a target. First match wins, never raises.

        Order: empty/"all", 1-based index, alias (case-insensitive), exact
        catalog value, anything URL-like, then the input unchanged.
        """
        text = (raw or "").strip()
        if not text or text.lower() == "all":
            return ResolvedTarget.all()

        try:
            index = int(text)
        except ValueError:
            index = None
        if index is not None and 1 <= index <= len(self.mirrors):
            mirror = self.mirrors[index - 1]
            return ResolvedTarget.custom() if mirror.is_custom else ResolvedTarget.of(mirror.value)

        alias_match = self._alias_map.get(text.lower())
        if alias_match is not None:
            return ResolvedTarget.custom() if alias_match.is_custom else ResolvedTarget.of(alias_match.value)

        # Catalog values, URL-like input and unrecognized input all pass
        # through unchanged; the probe decides whether they are reachable.
        return ResolvedTarget.of(text)

    def normalize_address(self, value: str | None) -> str:
        """Canonical form for storage: alias resolved, empty means the default."""
        text = (value or "").strip()
        if not text:
            return self.default_address
        mirror = self._alias_map.get(text.lower())
        if mirror is None or mirror.is_custom:
            return text
        return mirror.value
