"""nodelinks utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .get_home_dir import get_home_dir
from .get_logger import get_logger
from .get_package_version import get_package_version
from .normalize_path import normalize_path

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_logger",
    "get_package_version",
    "normalize_path",
]
