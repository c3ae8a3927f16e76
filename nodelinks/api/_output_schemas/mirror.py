"""Output schemas for mirror latency and selection commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MirrorTestOutput(BaseOutputSchema):
    """Output schema for mirror test command.

    Output structure:
    - target: str - "all" when the whole catalog was probed, otherwise the probed address
    - results: list[dict] - probe results, successes first in ascending latency
    - recommended: str - fastest reachable address (catalog default if none answered)
    """

    target: str = Field(..., description="'all' or the probed address")
    results: list[dict[str, Any]] = Field(..., description="Probe results in ranked order")
    recommended: str = Field(..., description="Recommended address, empty when a single address was probed")


class MirrorSetOutput(BaseOutputSchema):
    """Output schema for mirror set command."""

    repo: str = Field(..., description="Registry address now configured, empty on failure")
    previous: str = Field(..., description="Registry address before the change")
    config_path: str = Field(..., description="Path to the settings file")


class MirrorSelectOutput(BaseOutputSchema):
    """Output schema for the interactive rank-and-select command."""

    selected: str = Field(..., description="Address chosen by the user, empty if none")
    changed: bool = Field(..., description="Whether the settings were updated")
    results: list[dict[str, Any]] = Field(..., description="Probe results shown to the user")


register_output_schema("mirror", "test", MirrorTestOutput)
register_output_schema("mirror", "set", MirrorSetOutput)
register_output_schema("mirror", "select", MirrorSelectOutput)
