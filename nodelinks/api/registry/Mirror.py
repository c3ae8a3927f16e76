"""Registry mirror entry."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Mirror(BaseModel):
    """One npm registry mirror from the catalog.

    An empty ``value`` marks the slot where the user supplies their own address.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Display name")
    value: str = Field("", description="Canonical address, empty for the custom slot")
    alias: tuple[str, ...] = Field(default=(), description="Lowercase aliases")

    @field_validator("alias")
    @classmethod
    def _lowercase_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(a.strip().lower() for a in v if a.strip())

    @property
    def is_custom(self) -> bool:
        return self.value == ""
