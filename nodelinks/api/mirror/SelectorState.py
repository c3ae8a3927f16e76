"""States of the interactive mirror selector."""

from enum import Enum, auto


class SelectorState(Enum):
    SHOW_PAGE = auto()
    AWAIT_INPUT = auto()
    CONFIRM_SELECTION = auto()
    PROVIDE_CUSTOM_ADDRESS = auto()
    DONE = auto()
