"""Interactive prompt abstraction."""

from .ConsolePrompt import ConsolePrompt
from .Prompt import Prompt

__all__ = ["ConsolePrompt", "Prompt"]
