"""Raised when the user quits interactive initialization."""


class InitializationCancelled(Exception):
    def __init__(self) -> None:
        super().__init__("Initialization cancelled")
