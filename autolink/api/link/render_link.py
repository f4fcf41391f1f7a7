"""Format a resolved candidate as wikilink markup (UNO: single function)."""

from ..registry.Candidate import Candidate
from ..registry.is_under_dir import is_under_dir
from ..registry.strip_base_dir import strip_base_dir
from .LinkSettings import LinkSettings


def render_link(candidate: Candidate, matched: str, settings: LinkSettings, in_table: bool = False) -> str:
    """Build ``[[path]]`` or ``[[path|display]]`` for ``matched`` text.

    - alias keys display the alias (the matched text when case-insensitive)
    - nested paths display the last segment of the matched text
    - flat paths add a display only when the matched text differs from the path
    Paths under ``remove_alias_in_dirs`` never carry a display. Inside a table
    row the pipe is escaped.
    """
    path = strip_base_dir(candidate.path, settings.base_dir)
    bare = any(is_under_dir(path, d, settings.ignore_case) for d in settings.remove_alias_in_dirs)

    if candidate.kind == "alias":
        display = matched if settings.ignore_case else candidate.alias
        content = path if bare else f"{path}|{display}"
    elif "/" in path:
        content = path if bare else f"{path}|{matched.rsplit('/', 1)[-1]}"
    elif settings.ignore_case and matched.lower() == path.lower():
        content = matched
    elif matched in (path, candidate.path):
        content = path
    else:
        content = f"{path}|{matched}"

    if in_table:
        content = content.replace("|", "\\|")
    return f"[[{content}]]"
