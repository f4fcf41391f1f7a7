"""Frontmatter alias reader (UNO: single function)."""

from collections.abc import Mapping
from typing import Any

from .constants import ALIAS_KEYS


def read_aliases(data: Mapping[str, Any]) -> list[str]:
    """Aliases from ``aliases``/``alias``, given as a string or a list."""
    aliases: list[str] = []
    for key in ALIAS_KEYS:
        value = data.get(key)
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            continue
        for item in value:
            if item is None:
                continue
            alias = str(item).strip()
            if alias and alias not in aliases:
                aliases.append(alias)
    return aliases
