"""Get nodelinks home directory path or path under it."""

import os
from pathlib import Path

from ..constants import NODELINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get nodelinks home directory path or path under it.

    Checks NODELINKS_HOME environment variable first, defaults to ~/.nodelinks if not set.

    Args:
        *parts: Optional path components to join (e.g., "settings.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.nodelinks")
        >>> get_home_dir("repos.json")
        Path("/Users/user/.nodelinks/repos.json")
    """
    home_env = os.environ.get("NODELINKS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / NODELINKS_HOME_EXT

    return home / Path(*parts) if parts else home
