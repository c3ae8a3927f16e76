"""Locate the npm executable."""

import shutil


def npm_executable() -> str:
    # shutil.which also finds npm.cmd on Windows
    return shutil.which("npm") or "npm"
