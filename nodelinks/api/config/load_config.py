"""Load settings, falling back to interactive initialization."""

import json
from contextlib import suppress
from pathlib import Path

from ...utils.get_logger import get_logger
from ..guard.is_dangerous_path import is_dangerous_path
from ..mirror.Prober import Prober
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog
from .initialize import initialize
from .NodelinksConfig import NodelinksConfig

logger = get_logger("config")


def load_config(
    catalog: RegistryCatalog,
    prompt: Prompt,
    path: Path | None = None,
    prober: Prober | None = None,
) -> NodelinksConfig:
    """Return the stored settings, initializing interactively when needed.

    A missing or malformed settings file starts initialization instead of
    failing. A stored record that violates the safety check is deleted first.
    A valid record is re-saved in normalized form.
    """
    path = path or NodelinksConfig.get_config_path()

    if not path.exists():
        logger.info("No settings at %s, initializing", path)
        prompt.say(f"No settings found at {path}; starting initialization.")
        return initialize(catalog, prompt, path=path, prober=prober)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        config = NodelinksConfig.from_dict(raw, catalog)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and pydantic's ValidationError are ValueErrors
        logger.warning("Malformed settings at %s: %s", path, e)
        prompt.say(f"Settings at {path} are invalid ({e}); starting initialization.")
        return initialize(catalog, prompt, path=path, prober=prober)

    if is_dangerous_path(config.folder_path):
        logger.error("Stored folderPath %s contains the nodelinks installation; removing %s", config.folder_path, path)
        prompt.say(
            f"folderPath {config.folder_path} contains the nodelinks installation and npm would delete it. "
            "The settings file was removed; starting initialization."
        )
        with suppress(FileNotFoundError):
            path.unlink()
        return initialize(catalog, prompt, path=path, prober=prober)

    config.save(catalog, path)
    return config
