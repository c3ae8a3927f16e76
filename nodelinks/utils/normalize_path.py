"""Normalize a shared store path.

Expands user home directory (~), makes the path absolute WITHOUT resolving
symlinks, and strips a trailing node_modules component so the stored path
always names the store root.
"""

from pathlib import Path

from ..constants import DEPS_DIRNAME


def normalize_path(path: str | Path) -> Path:
    """Expand user, make absolute and drop a trailing node_modules component."""
    p = Path(path).expanduser().absolute()
    if p.name == DEPS_DIRNAME:
        p = p.parent
    return p
