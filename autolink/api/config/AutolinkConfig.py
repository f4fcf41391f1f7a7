"""Top-level autolink configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..link.LinkSettings import LinkSettings
from .LogConfig import LogConfig
from .RegistryConfig import RegistryConfig


class AutolinkConfig(BaseModel):
    """Top-level configuration for linking, registry building and logging."""

    model_config = ConfigDict(extra="forbid")

    link: LinkSettings = Field(default_factory=LinkSettings)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get autolink home directory based on AUTOLINK_HOME or default to ~/.autolink."""
        home_env = os.environ.get("AUTOLINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".autolink"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the autolink home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "AutolinkConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @classmethod
    def load_or_default(cls) -> "AutolinkConfig":
        """Load the config file, or return defaults when there is none."""
        if not cls.get_config_path().exists():
            return cls()
        return cls.load()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "link": self.link.model_dump(),
            "registry": self.registry.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Writes to a temp file and renames it over the target.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
