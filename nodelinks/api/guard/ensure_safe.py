"""Raise if a shared store path fails the safety check."""

from pathlib import Path

from .is_dangerous_path import is_dangerous_path
from .UnsafePathError import UnsafePathError


def ensure_safe(path: str | Path) -> None:
    """Raise UnsafePathError if ``path`` would expose the tool's install to npm."""
    if is_dangerous_path(path):
        raise UnsafePathError(path)
