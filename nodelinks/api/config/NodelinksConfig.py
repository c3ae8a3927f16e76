"""Persisted nodelinks settings."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_MIRROR_TIMEOUT_MS, SETTINGS_FILENAME
from ...utils.get_home_dir import get_home_dir
from ...utils.get_logger import get_logger
from ...utils.normalize_path import normalize_path
from ..guard.is_dangerous_path import is_dangerous_path
from ..guard.UnsafePathError import UnsafePathError
from ..registry.RegistryCatalog import RegistryCatalog

logger = get_logger("config")


class NodelinksConfig(BaseModel):
    """Shared store location, registry mirror and probe timeout.

    Serialized as ``{"folderPath", "repo", "mirrorTimeout"}``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    folder_path: Path = Field(..., alias="folderPath", description="Shared store root (without node_modules)")
    repo: str = Field(..., description="Registry mirror address, bare host or URL")
    mirror_timeout: int = Field(DEFAULT_MIRROR_TIMEOUT_MS, gt=0, alias="mirrorTimeout", description="Probe timeout in ms")

    @field_validator("folder_path", mode="before")
    @classmethod
    def _normalize_folder_path(cls, v: Any) -> Path:
        if not isinstance(v, (str, Path)) or not str(v).strip():
            raise ValueError("folderPath must be a non-empty path")
        return normalize_path(v)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the settings file based on NODELINKS_HOME or ~/.nodelinks."""
        return get_home_dir(SETTINGS_FILENAME)

    @classmethod
    def from_dict(cls, raw: Any, catalog: RegistryCatalog) -> "NodelinksConfig":
        """Build from a settings document, filling defaults for missing fields.

        The home directory stands in for a missing folderPath only as a
        placeholder; initialization is expected to replace it.

        Raises:
            ValueError: If the document is not an object or fails validation
        """
        if not isinstance(raw, dict):
            raise ValueError("Settings document must be a JSON object")
        data = dict(raw)
        if not data.get("repo"):
            data["repo"] = catalog.default_address
        if not data.get("folderPath"):
            data["folderPath"] = str(get_home_dir())
        data.setdefault("mirrorTimeout", DEFAULT_MIRROR_TIMEOUT_MS)
        return cls.model_validate(data)

    @property
    def registry_url(self) -> str:
        """Registry as a URL for npm's ``--registry`` flag."""
        return self.repo if "://" in self.repo else f"https://{self.repo}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk document."""
        return {
            "folderPath": str(self.folder_path),
            "repo": self.repo,
            "mirrorTimeout": self.mirror_timeout,
        }

    def save(self, catalog: RegistryCatalog, path: Path | None = None) -> None:
        """Validate and write the settings atomically.

        The safety check runs before anything is written. On violation the
        existing settings file is removed so the next run re-initializes.

        Raises:
            UnsafePathError: If folder_path contains the tool's own installation
            RuntimeError: If the file cannot be written
        """
        path = path or self.get_config_path()

        if is_dangerous_path(self.folder_path):
            logger.error("Refusing to save settings: %s contains the nodelinks installation", self.folder_path)
            with suppress(FileNotFoundError):
                path.unlink()
            raise UnsafePathError(self.folder_path)

        self.repo = catalog.normalize_address(self.repo)

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=2, ensure_ascii=False)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save settings to {path}: {e}") from e

        logger.info("Saved settings to %s (folderPath=%s, repo=%s)", path, self.folder_path, self.repo)

    @classmethod
    def delete(cls, path: Path | None = None) -> bool:
        """Remove the settings file. Returns False if there was none."""
        path = path or cls.get_config_path()
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.info("Removed settings file %s", path)
        return True
