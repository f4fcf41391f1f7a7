"""Output schema for ``link registry``."""

from pydantic import BaseModel, ConfigDict, Field


class LinkRegistryOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str = Field(..., description="Vault directory or registry file")
    descriptors: int = 0
    pages: int = 0
    keys: int = 0
    rejected: list[str] = Field(default_factory=list)
    ambiguous: dict[str, list[str]] = Field(
        default_factory=dict, description="Shorthands shared by several pages"
    )
    errors: list[str] = Field(default_factory=list)
