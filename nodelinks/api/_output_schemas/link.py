"""Output schemas for project link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCreateOutput(BaseOutputSchema):
    """Output schema for link create command."""

    link_path: str = Field(..., description="Project-local node_modules path")
    target_path: str = Field(..., description="Shared node_modules the link points to")
    created: bool = Field(..., description="False when the link already existed or creation failed")


class LinkDeleteOutput(BaseOutputSchema):
    """Output schema for link delete command."""

    link_path: str = Field(..., description="Project-local node_modules path")
    removed: bool = Field(..., description="False when there was no link to remove")


register_output_schema("link", "create", LinkCreateOutput)
register_output_schema("link", "delete", LinkDeleteOutput)
