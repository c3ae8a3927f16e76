"""Check whether a path is a symlink or a Windows directory junction."""

import os
from pathlib import Path


def is_link(path: Path) -> bool:
    if path.is_symlink():
        return True
    isjunction = getattr(os.path, "isjunction", None)
    return bool(isjunction and isjunction(path))
