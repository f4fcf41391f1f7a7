"""Collect page descriptors from a vault directory (UNO: single function)."""

import logging
from pathlib import Path

from ..markdown.split_frontmatter import split_frontmatter
from ..registry.PageDescriptor import PageDescriptor
from .constants import EXCLUDED_KEYS, MARKDOWN_SUFFIX, SCOPED_KEYS
from .read_aliases import read_aliases
from .read_flag import read_flag
from .to_page_path import to_page_path

logger = logging.getLogger(__name__)


def collect_descriptors(vault_dir: Path) -> list[PageDescriptor]:
    """Describe every Markdown page under ``vault_dir``.

    Hidden directories are skipped. Unreadable files are logged and left out;
    invalid frontmatter is treated as empty.
    """
    vault_dir = vault_dir.expanduser().resolve()
    if not vault_dir.is_dir():
        raise ValueError(f"Vault directory not found: {vault_dir}")

    descriptors: list[PageDescriptor] = []
    for file_path in sorted(vault_dir.rglob(f"*{MARKDOWN_SUFFIX}")):
        relative = file_path.relative_to(vault_dir)
        if any(part.startswith(".") for part in relative.parts) or not file_path.is_file():
            continue
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable page %s: %s", file_path, e)
            continue

        data = split_frontmatter(text).data
        descriptors.append(
            PageDescriptor(
                path=to_page_path(file_path, vault_dir),
                aliases=read_aliases(data) or None,
                scoped=read_flag(data, SCOPED_KEYS),
                excluded=read_flag(data, EXCLUDED_KEYS),
            )
        )

    logger.debug("Collected %d descriptors from %s", len(descriptors), vault_dir)
    return descriptors
