"""Read the probe timeout without triggering initialization."""

import json
from pathlib import Path

from ...constants import DEFAULT_MIRROR_TIMEOUT_MS
from .NodelinksConfig import NodelinksConfig


def read_mirror_timeout(path: Path | None = None) -> int:
    """Return mirrorTimeout from the settings file, or the default if unavailable."""
    path = path or NodelinksConfig.get_config_path()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return DEFAULT_MIRROR_TIMEOUT_MS
    value = raw.get("mirrorTimeout") if isinstance(raw, dict) else None
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return DEFAULT_MIRROR_TIMEOUT_MS
