"""List top-level packages in the shared store."""

import json
import subprocess

from ..config.NodelinksConfig import NodelinksConfig
from .npm_executable import npm_executable


def list_installed(config: NodelinksConfig) -> list[str]:
    """Sorted top-level dependency names from ``npm list --json --depth=0``.

    npm exits non-zero for extraneous or missing packages while still
    printing the tree, so only the JSON is checked.

    Raises:
        ValueError: If npm's output is not a JSON object
    """
    if not config.folder_path.is_dir():
        return []

    completed = subprocess.run(
        [npm_executable(), "list", "--json", "--depth=0"],
        cwd=config.folder_path,
        capture_output=True,
        text=True,
        check=False,
    )
    try:
        data = json.loads(completed.stdout or "")
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse npm list output: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("npm list output is not a JSON object")
    return sorted(data.get("dependencies") or {})
