"""Protocol for the interactive question/answer exchange."""

from typing import Protocol


class Prompt(Protocol):
    """Text exchange with the user.

    ``ask`` returns the stripped answer; an empty string means the user just
    pressed enter.
    """

    def ask(self, question: str) -> str: ...

    def say(self, message: str = "") -> None: ...
