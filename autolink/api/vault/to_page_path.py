"""Virtual page path of a Markdown file (UNO: single function)."""

from pathlib import Path

from .constants import MARKDOWN_SUFFIX


def to_page_path(file_path: Path, vault_dir: Path) -> str:
    """Slash-delimited path of ``file_path`` inside ``vault_dir`` without ``.md``.

    Files outside the vault map to their bare stem.
    """
    try:
        relative = file_path.relative_to(vault_dir)
    except ValueError:
        relative = Path(file_path.name)
    page = relative.as_posix()
    if page.endswith(MARKDOWN_SUFFIX):
        page = page[: -len(MARKDOWN_SUFFIX)]
    return page
