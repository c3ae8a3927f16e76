"""Persist a new registry mirror in the settings."""

from ..config.load_config import load_config
from ..config.NodelinksConfig import NodelinksConfig
from ..prompt.Prompt import Prompt
from ..registry.RegistryCatalog import RegistryCatalog


def set_repo(catalog: RegistryCatalog, prompt: Prompt, address: str) -> tuple[NodelinksConfig, str]:
    """Load (or initialize) the settings, switch the mirror and save.

    Returns the saved settings and the previous mirror address.

    Raises:
        UnsafePathError: If the stored folder path fails the safety check on save
    """
    config = load_config(catalog, prompt)
    previous = config.repo
    config.repo = address
    config.save(catalog)
    return config, previous
