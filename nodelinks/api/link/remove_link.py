"""Remove the project node_modules link."""

import os
from pathlib import Path

from ...constants import DEPS_DIRNAME
from ...utils.get_logger import get_logger
from .is_link import is_link
from .LinkError import LinkError

logger = get_logger("link")


def remove_link(project_dir: str | Path | None = None) -> Path | None:
    """Remove ``<project>/node_modules`` if it is a link.

    Returns the removed path, or None if nothing was there. Only the link is
    removed; the shared store is untouched.

    Raises:
        LinkError: If the path is a real directory or file
    """
    link_path = Path(project_dir or Path.cwd()).absolute() / DEPS_DIRNAME
    if not os.path.lexists(link_path):
        return None
    if not is_link(link_path):
        raise LinkError("Not a link, refusing to delete", link_path)

    try:
        if link_path.is_symlink():
            link_path.unlink()
        else:
            # directory junction
            os.rmdir(link_path)
    except OSError as e:
        raise LinkError(f"Cannot remove link ({e.strerror or e})", link_path) from e

    logger.info("Removed link %s", link_path)
    return link_path
