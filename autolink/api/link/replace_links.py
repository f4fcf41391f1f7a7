"""Rewrite bare mentions in a body into wikilinks (UNO: single function)."""

import logging
import unicodedata

from ..markdown.find_table_rows import find_table_rows
from ..markdown.protect_segments import protect_segments
from ..registry.build_fallback_index import build_fallback_index
from ..registry.CandidateRegistry import CandidateRegistry
from ..registry.FallbackIndexCache import FallbackIndexCache
from ..registry.get_effective_namespace import get_effective_namespace
from .LinkSettings import LinkSettings
from .scan_segment import scan_segment
from .ScanContext import ScanContext

logger = logging.getLogger(__name__)


def replace_links(
    body: str,
    file_path: str,
    registry: CandidateRegistry,
    settings: LinkSettings | None = None,
    cache: FallbackIndexCache | None = None,
) -> str:
    """Return ``body`` with every linkable mention wrapped in ``[[...]]``.

    Args:
        body: Markdown text without frontmatter
        file_path: Slash-delimited path of the document, without extension
        registry: Candidates to link to
        settings: Scan options; defaults apply when omitted
        cache: Fallback index cache shared across calls; without one the
            index is rebuilt for this call

    Protected spans (code, links, URLs, callouts and optionally headings) are
    reproduced unchanged. Matching never raises: anything that cannot be
    linked is copied through.
    """
    settings = settings or LinkSettings()
    if len(body) <= settings.min_char_count:
        return body

    if settings.ignore_case != registry.ignore_case:
        logger.debug(
            "Registry built with ignore_case=%s, settings ask for %s; matching follows the registry",
            registry.ignore_case,
            settings.ignore_case,
        )

    body = unicodedata.normalize("NFC", body)
    segments = protect_segments(body, settings.ignore_headings)
    if all(segment.protected for segment in segments):
        return body

    if cache is not None:
        fallback = cache.get(registry, registry.ignore_case)
    else:
        fallback = build_fallback_index(registry, registry.ignore_case)

    ctx = ScanContext(
        registry=registry,
        fallback=fallback,
        settings=settings,
        file_path=file_path,
        namespace=get_effective_namespace(file_path, settings.base_dir),
        body=body,
        tables=find_table_rows(body),
    )
    return "".join(
        segment.content if segment.protected else scan_segment(segment.content, segment.start, ctx)
        for segment in segments
    )
