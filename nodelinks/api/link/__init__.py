"""Project link domain."""

from .._output_schemas.link import LinkCreateOutput, LinkDeleteOutput

__all__ = ["LinkCreateOutput", "LinkDeleteOutput"]
