"""Output schema for ``link apply``."""

from pydantic import BaseModel, ConfigDict, Field

from .LinkApplyFile import LinkApplyFile


class LinkApplyOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str
    files: list[LinkApplyFile] = Field(default_factory=list)
    links_added: int = 0
    changed: int = Field(0, description="Number of files whose text changed")
    written: bool = False
    content: str | None = Field(None, description="Linked text when a single file was given")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
