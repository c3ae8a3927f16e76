"""Bootstrap the shared dependency store."""

import subprocess

from ...constants import DEPS_DIRNAME
from ...utils.get_logger import get_logger
from ..config.NodelinksConfig import NodelinksConfig
from .npm_executable import npm_executable

logger = get_logger("npm")


def ensure_store(config: NodelinksConfig) -> None:
    """Create the store directory and give it a package.json.

    Nothing happens when ``node_modules`` is already there.

    Raises:
        RuntimeError: If ``npm init`` fails
    """
    store = config.folder_path
    if (store / DEPS_DIRNAME).exists():
        return

    store.mkdir(parents=True, exist_ok=True)
    if (store / "package.json").exists():
        return

    logger.info("Initializing package.json in %s", store)
    completed = subprocess.run(
        [npm_executable(), "init", "-y", "--registry", config.registry_url],
        cwd=store,
        check=False,
    )
    if completed.returncode != 0:
        raise RuntimeError(f"npm init failed in {store} (exit code {completed.returncode})")
