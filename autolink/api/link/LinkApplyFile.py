"""Per-file result of a link apply run."""

from pydantic import BaseModel, ConfigDict, Field


class LinkApplyFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., description="File that was linked")
    page: str = Field(..., description="Page path used for namespace resolution")
    changed: bool = Field(..., description="Whether linking altered the text")
    links_added: int = Field(..., description="Number of wikilinks added")
    skipped: bool = Field(False, description="Linking disabled by frontmatter")
