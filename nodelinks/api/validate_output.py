"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas._registry import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` against the schema registered for ``func``.

    The schema key is derived from the function's module, e.g.
    ``nodelinks.api.mirror.cmd_test`` -> ("mirror", "test").

    Raises:
        ValueError: If no schema is registered or the output does not match it
    """
    module = getattr(func, "__module__", "") or ""
    parts = module.split(".")
    if len(parts) < 2 or not parts[-1].startswith("cmd_"):
        raise ValueError(f"Cannot derive output schema key from module {module!r}")
    domain = parts[-2]
    command_name = parts[-1][len("cmd_") :]

    schema = get_output_schema(domain, command_name)
    if schema is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command_name}: {e}") from e
