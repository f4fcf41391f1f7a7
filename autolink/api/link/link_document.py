"""Link a whole Markdown document (UNO: single function)."""

import logging

from ..markdown.split_frontmatter import split_frontmatter
from ..registry.CandidateRegistry import CandidateRegistry
from ..registry.FallbackIndexCache import FallbackIndexCache
from ..vault.constants import DISABLED_KEYS
from ..vault.read_flag import read_flag
from .LinkSettings import LinkSettings
from .replace_links import replace_links

logger = logging.getLogger(__name__)


def link_document(
    text: str,
    file_path: str,
    registry: CandidateRegistry,
    settings: LinkSettings | None = None,
    cache: FallbackIndexCache | None = None,
) -> str:
    """Link the body of ``text`` and keep its frontmatter byte-for-byte.

    Documents whose frontmatter sets ``autolink-off`` are returned unchanged.
    """
    frontmatter = split_frontmatter(text)
    if read_flag(frontmatter.data, DISABLED_KEYS):
        logger.debug("Linking disabled by frontmatter in %s", file_path)
        return text
    return frontmatter.raw + replace_links(frontmatter.body, file_path, registry, settings, cache)
