"""Config API domain."""

from .._output_schemas.config import (
    ConfigReinitOutput,
    ConfigRemoveOutput,
    ConfigShowOutput,
    ConfigVersionOutput,
)

__all__ = [
    "ConfigReinitOutput",
    "ConfigRemoveOutput",
    "ConfigShowOutput",
    "ConfigVersionOutput",
]
