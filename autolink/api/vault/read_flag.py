"""Frontmatter boolean flag reader (UNO: single function)."""

from collections.abc import Iterable, Mapping
from typing import Any

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})


def read_flag(data: Mapping[str, Any], keys: Iterable[str]) -> bool:
    """True when any of ``keys`` is set to a true value."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool):
            if value:
                return True
        elif isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS:
            return True
    return False
