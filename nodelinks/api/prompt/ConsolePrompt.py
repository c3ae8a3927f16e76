"""Prompt backed by a Rich console."""

from rich.console import Console


class ConsolePrompt:
    """Asks on the terminal via Rich; messages go to stderr so stdout stays machine-readable.

    EOF on input propagates as EOFError.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def ask(self, question: str) -> str:
        return self.console.input(question, markup=False).strip()

    def say(self, message: str = "") -> None:
        self.console.print(message, markup=False, highlight=False)
