"""Locate the shared node_modules directory of a store."""

from pathlib import Path

from ...constants import DEPS_DIRNAME


def resolve_store_path(folder_path: str | Path) -> Path:
    """Return ``<folder_path>/node_modules`` unless it already ends there."""
    store = Path(folder_path).expanduser().absolute()
    return store if store.name == DEPS_DIRNAME else store / DEPS_DIRNAME
