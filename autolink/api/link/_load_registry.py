"""Build the registry a command links against."""

import json
from pathlib import Path
from typing import Any

from ..config.AutolinkConfig import AutolinkConfig
from ..registry.build_registry import build_registry
from ..registry.CandidateRegistry import CandidateRegistry
from ..vault.collect_descriptors import collect_descriptors


def _load_registry(
    config: AutolinkConfig, vault_dir: Path | None = None, registry_file: Path | None = None
) -> tuple[CandidateRegistry, int]:
    """Return the registry and the number of descriptors it was built from.

    A registry file (a JSON list of descriptors) takes precedence over a vault
    directory.

    Raises:
        ValueError: If the source is missing or unreadable
    """
    descriptors: Any
    if registry_file is not None:
        if not registry_file.is_file():
            raise ValueError(f"Registry file not found: {registry_file}")
        try:
            descriptors = json.loads(registry_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in registry file {registry_file}: {e}") from e
    elif vault_dir is not None:
        descriptors = collect_descriptors(vault_dir)
    else:
        raise ValueError("Either a vault directory or a registry file is required")

    registry = build_registry(
        descriptors,
        base_dir=config.link.base_dir,
        ignore_case=config.link.ignore_case,
        exclude_dirs=config.registry.exclude_dirs,
        consider_aliases=config.registry.consider_aliases,
    )
    count = len(descriptors) if isinstance(descriptors, list) else 0
    return registry, count
