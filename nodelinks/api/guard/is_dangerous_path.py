"""Detect shared store paths that alias the tool's own installation."""

import os
from pathlib import Path

from ...constants import DEPS_DIRNAME, TOOL_PACKAGE_NAME
from ...utils.get_logger import get_logger
from ..link.is_link import is_link

logger = get_logger("guard")


def is_dangerous_path(candidate: str | Path, tool_name: str = TOOL_PACKAGE_NAME) -> bool:
    """Return True if ``<candidate>/node_modules`` holds a link named ``tool_name``.

    A global ``npm install -g`` of the tool shows up as a symlink (a directory
    junction on Windows), so pointing the shared store there would let npm
    manage (and delete) our own files.
    Listing failures mean there is nothing to detect yet and return False.
    """
    deps_dir = Path(candidate).expanduser().absolute()
    if deps_dir.name != DEPS_DIRNAME:
        deps_dir = deps_dir / DEPS_DIRNAME

    try:
        with os.scandir(deps_dir) as entries:
            for entry in entries:
                if entry.name == tool_name and is_link(Path(entry.path)):
                    logger.warning("Found %s link in %s", tool_name, deps_dir)
                    return True
    except OSError as e:
        logger.debug("Cannot list %s: %s", deps_dir, e)
        return False

    return False
