"""Run npm in the shared dependency store."""

import subprocess
from collections.abc import Sequence

from ...utils.get_logger import get_logger
from ..config.NodelinksConfig import NodelinksConfig
from ..guard.ensure_safe import ensure_safe
from .build_npm_args import build_npm_args
from .ensure_store import ensure_store
from .npm_executable import npm_executable

logger = get_logger("npm")


def run_npm(args: Sequence[str], config: NodelinksConfig) -> int:
    """Run ``npm <args>`` with cwd set to the store and return its exit code.

    Blocks until npm exits. Output goes straight to the terminal.

    Raises:
        UnsafePathError: If the store contains the tool's own installation
        RuntimeError: If the store cannot be bootstrapped
    """
    ensure_safe(config.folder_path)
    ensure_store(config)

    npm_args = build_npm_args(args, config.registry_url)
    logger.info("Running npm %s in %s", " ".join(npm_args), config.folder_path)
    completed = subprocess.run([npm_executable(), *npm_args], cwd=config.folder_path, check=False)
    if completed.returncode != 0:
        logger.warning("npm %s exited with %d", npm_args[0] if npm_args else "", completed.returncode)
    return completed.returncode
