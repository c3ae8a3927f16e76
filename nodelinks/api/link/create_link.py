"""Create the project node_modules link to the shared store."""

import os
import subprocess
import sys
from pathlib import Path

from ...constants import DEPS_DIRNAME
from ...utils.get_logger import get_logger
from .is_link import is_link
from .LinkError import LinkError
from .resolve_store_path import resolve_store_path

logger = get_logger("link")


def _make_junction(link_path: Path, target: Path) -> None:
    completed = subprocess.run(
        ["cmd", "/c", "mklink", "/J", str(link_path), str(target)],
        capture_output=True,
        text=True,
        check=False,
    )
    if completed.returncode != 0:
        detail = (completed.stderr or completed.stdout).strip()
        raise LinkError(f"mklink /J failed ({detail})", link_path)


def create_link(folder_path: str | Path, project_dir: str | Path | None = None) -> Path:
    """Link ``<project>/node_modules`` to the shared store.

    Returns the link path. An existing link is left as it is. Uses a
    directory junction on Windows.

    Raises:
        LinkError: If the store has no node_modules yet, or a real file or
            directory occupies the link path
    """
    target = resolve_store_path(folder_path)
    if not target.is_dir():
        raise LinkError("Shared store does not exist, install a package first", target)

    link_path = Path(project_dir or Path.cwd()).absolute() / DEPS_DIRNAME
    if os.path.lexists(link_path):
        if is_link(link_path):
            logger.info("Link %s already exists, nothing to do", link_path)
            return link_path
        raise LinkError("Refusing to replace existing non-link entry", link_path)

    try:
        if sys.platform == "win32":
            _make_junction(link_path, target)
        else:
            os.symlink(target, link_path, target_is_directory=True)
    except OSError as e:
        raise LinkError(f"Cannot create link to {target} ({e.strerror or e})", link_path) from e

    logger.info("Linked %s -> %s", link_path, target)
    return link_path
