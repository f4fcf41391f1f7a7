"""Page descriptor model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PageDescriptor(BaseModel):
    """A known page that text may be linked to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="Slash-delimited page path without extension")
    aliases: list[str] | None = Field(None, description="Alternative display names for the page")
    scoped: bool = Field(False, description="Only linkable from documents in the same namespace")
    excluded: bool = Field(False, description="Never linked")

    @field_validator("path")
    @classmethod
    def _path_not_empty(cls, v: str) -> str:
        if not v.strip("/"):
            raise ValueError("path must not be empty")
        return v

    @field_validator("aliases")
    @classmethod
    def _drop_blank_aliases(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return [alias for alias in v if alias.strip()]
