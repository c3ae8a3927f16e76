"""Paged interactive choice among ranked mirrors."""

import math

from ...constants import PAGE_SIZE
from ..prompt.Prompt import Prompt
from .SelectorEntry import SelectorEntry
from .SelectorState import SelectorState


class MirrorSelector:
    """Finite-state loop over SHOW_PAGE -> AWAIT_INPUT -> (PROVIDE_CUSTOM_ADDRESS) -> CONFIRM_SELECTION -> DONE.

    Input tokens: ``n``/``p`` turn pages (only with more than one page), ``q``
    quits, a number picks by its position in the full list. Invalid input is
    reported and asked again without changing anything.
    """

    def __init__(self, entries: list[SelectorEntry], prompt: Prompt, page_size: int = PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.entries = entries
        self.prompt = prompt
        self.page_size = page_size
        self.page = 0
        self.state = SelectorState.SHOW_PAGE

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self.entries) / self.page_size))

    def run(self) -> str | None:
        """Drive the loop until DONE; return the confirmed address or None."""
        chosen: SelectorEntry | None = None
        address = ""
        selection: str | None = None
        self.state = SelectorState.SHOW_PAGE

        while self.state is not SelectorState.DONE:
            if self.state is SelectorState.SHOW_PAGE:
                self._render_page()
                self.state = SelectorState.AWAIT_INPUT

            elif self.state is SelectorState.AWAIT_INPUT:
                answer = self.prompt.ask("Enter choice: ").lower()
                if self.total_pages > 1 and answer == "n" and self.page < self.total_pages - 1:
                    self.page += 1
                    self.state = SelectorState.SHOW_PAGE
                elif self.total_pages > 1 and answer == "p" and self.page > 0:
                    self.page -= 1
                    self.state = SelectorState.SHOW_PAGE
                elif answer == "q":
                    self.state = SelectorState.DONE
                else:
                    chosen = self._parse_choice(answer)
                    if chosen is None:
                        self.prompt.say(f"Invalid input '{answer}', enter a number from 1 to {len(self.entries)}")
                    elif chosen.is_custom:
                        self.state = SelectorState.PROVIDE_CUSTOM_ADDRESS
                    else:
                        address = chosen.address
                        self.state = SelectorState.CONFIRM_SELECTION

            elif self.state is SelectorState.PROVIDE_CUSTOM_ADDRESS:
                custom = self.prompt.ask("Custom registry address (enter to cancel): ")
                if not custom:
                    self.prompt.say("Custom address cancelled")
                    self.state = SelectorState.SHOW_PAGE
                else:
                    address = custom
                    self.state = SelectorState.CONFIRM_SELECTION

            elif self.state is SelectorState.CONFIRM_SELECTION:
                name = chosen.name if chosen else address
                self.prompt.say(f"Selected {name} ({address})")
                if self.prompt.ask("Use this mirror? (y/n): ").lower() == "y":
                    selection = address
                else:
                    self.prompt.say("Selection cancelled")
                self.state = SelectorState.DONE

        return selection

    def _parse_choice(self, answer: str) -> SelectorEntry | None:
        try:
            index = int(answer)
        except ValueError:
            return None
        if not 1 <= index <= len(self.entries):
            return None
        return self.entries[index - 1]

    def _render_page(self) -> None:
        start = self.page * self.page_size
        end = min(start + self.page_size, len(self.entries))
        self.prompt.say(
            f"Mirrors ranked by latency (page {self.page + 1}/{self.total_pages}, {len(self.entries)} entries):"
        )
        for position in range(start, end):
            entry = self.entries[position]
            shown = entry.address or "custom"
            self.prompt.say(f"  {position + 1:>2}. {entry.name:<24} ({shown}) {entry.status()}")
        self.prompt.say()
        if self.total_pages > 1:
            self.prompt.say("  n: next page, p: previous page")
        self.prompt.say(f"  1-{len(self.entries)}: choose a mirror, q: quit")
