"""Base directory prefix removal (UNO: single function)."""


def strip_base_dir(path: str, base_dir: str | None) -> str:
    """Return ``path`` relative to ``base_dir`` when it lies under it."""
    if base_dir and path.startswith(base_dir + "/"):
        return path[len(base_dir) + 1 :]
    return path
