"""Safety guard for shared store paths."""

from .ensure_safe import ensure_safe
from .is_dangerous_path import is_dangerous_path
from .UnsafePathError import UnsafePathError

__all__ = ["UnsafePathError", "ensure_safe", "is_dangerous_path"]
