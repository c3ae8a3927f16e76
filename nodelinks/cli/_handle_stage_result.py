"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._context import get_display_format
from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML per the root ``--display`` option)

    Raises:
        RuntimeError: If the root callback never stored a display format on ``ctx``
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format = get_display_format(ctx)
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
