"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    content: dict[str, Any] = Field(..., description="Settings document as stored on disk")
    config_path: str = Field(..., description="Path to the settings file")


class ConfigRemoveOutput(BaseOutputSchema):
    """Output schema for config remove command."""

    removed: bool = Field(..., description="Whether a settings file existed and was deleted")
    config_path: str = Field(..., description="Path to the settings file")


class ConfigReinitOutput(BaseOutputSchema):
    """Output schema for config reinit command."""

    content: dict[str, Any] = Field(..., description="Settings written by the initialization, empty if cancelled")
    config_path: str = Field(..., description="Path to the settings file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "remove", ConfigRemoveOutput)
register_output_schema("config", "reinit", ConfigReinitOutput)
register_output_schema("config", "version", ConfigVersionOutput)
