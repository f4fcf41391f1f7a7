"""Scan settings for link replacement."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinkSettings(BaseModel):
    """Options controlling how bare mentions are turned into links."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_dir: str | None = Field(None, description="Directory whose prefix is dropped from emitted paths")
    namespace_resolution: bool = Field(True, description="Resolve shared shorthands by path proximity")
    ignore_date_formats: bool = Field(True, description="Never link YYYY-MM-DD text")
    ignore_case: bool = Field(False, description="Match keys case-insensitively")
    prevent_self_linking: bool = Field(False, description="Never link a document to itself")
    remove_alias_in_dirs: list[str] = Field(
        default_factory=list, description="Directories whose links are emitted without a display alias"
    )
    min_char_count: int = Field(0, ge=0, description="Bodies at or below this length are left unchanged")
    ignore_headings: bool = Field(False, description="Leave heading lines unlinked")
    match_sentence_case: bool = Field(
        False, description="Let a capitalized sentence start match a lowercase-initial key"
    )

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip("/") or None
