"""Registry build configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RegistryConfig(BaseModel):
    """Which pages and keys enter the candidate registry."""

    model_config = ConfigDict(extra="forbid")

    exclude_dirs: list[str] = Field(default_factory=list, description="Pages under these directories are never linked")
    consider_aliases: bool = Field(True, description="Use frontmatter aliases as matchable keys")
