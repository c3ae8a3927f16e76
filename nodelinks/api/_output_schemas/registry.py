"""Output schemas for registry catalog commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RegistryListOutput(BaseOutputSchema):
    """Output schema for the catalog listing."""

    mirrors: list[dict[str, Any]] = Field(..., description="Catalog entries with 1-based index, name, value and aliases")
    catalog_path: str = Field(..., description="Path to the catalog document")


register_output_schema("registry", "list", RegistryListOutput)
