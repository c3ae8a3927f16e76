"""Access the objects the root callback stores on the Typer context."""

import typer

from ..api.prompt.Prompt import Prompt
from ..api.registry.RegistryCatalog import RegistryCatalog

DISPLAY_FORMATS = ("json", "yaml")


def get_catalog(ctx: typer.Context) -> RegistryCatalog:
    return ctx.obj["catalog"]


def get_prompt(ctx: typer.Context) -> Prompt:
    return ctx.obj["prompt"]


def get_display_format(ctx: typer.Context) -> str:
    """Display format from the nearest context that carries one.

    Raises:
        RuntimeError: If no context in the chain has a display format
        ValueError: If the stored format is not json or yaml
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value not in DISPLAY_FORMATS:
                raise ValueError(f"Invalid display_format value: {value!r}")
            return value
        current = current.parent
    raise RuntimeError("Display format not set in the Typer context chain")
