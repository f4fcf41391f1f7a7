"""Directory containment check (UNO: single function)."""


def is_under_dir(path: str, directory: str, ignore_case: bool = False) -> bool:
    """True when ``path`` equals ``directory`` or lies below it."""
    directory = directory.strip("/")
    if not directory:
        return False
    if ignore_case:
        path = path.lower()
        directory = directory.lower()
    return path == directory or path.startswith(directory + "/")
