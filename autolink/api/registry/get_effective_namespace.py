"""Effective namespace of a page or document path (UNO: single function)."""

from .strip_base_dir import strip_base_dir


def get_effective_namespace(path: str, base_dir: str | None) -> str:
    """First path segment, taken after the base directory when under it."""
    return strip_base_dir(path, base_dir).split("/", 1)[0]
