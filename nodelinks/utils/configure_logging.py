"""Configure unified nodelinks logging."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME
from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None) -> None:
    """Configure unified nodelinks logging.

    Args:
        home: Path to nodelinks home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILENAME

    root_logger = logging.getLogger("nodelinks")
    root_logger.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
