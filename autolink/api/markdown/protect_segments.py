"""Split a body into protected and scannable segments (UNO: single function)."""

import re
from functools import lru_cache

from .Segment import Segment
from .SpanMatcher import SpanMatcher

# Earlier entries win when two spans start at the same offset.
SPAN_MATCHERS: tuple[SpanMatcher, ...] = (
    SpanMatcher("fenced_code", r"```[\s\S]*?```"),
    SpanMatcher("inline_code", r"`[^`]*`"),
    SpanMatcher("wikilink", r"!?\[\[[^\]]+\]\]"),
    SpanMatcher("markdown_link", r"\[[^\]]+\]\([^)]+\)"),
    SpanMatcher("url", r"https?://[^\s]+"),
    SpanMatcher("callout", r"^>[ \t]*\[![^\]\n]+\][-+]?[^\n]*(?:\n>[^\n]*)*"),
)
HEADING_MATCHER = SpanMatcher("heading", r"^#{1,6}(?:[ \t][^\n]*)?$")

WHOLE_LINK = re.compile(r"\s*(?:\[\[[^\]]+\]\]|\[[^\]]+\]\([^)]+\))\s*")


@lru_cache(maxsize=2)
def _compile(ignore_headings: bool) -> re.Pattern[str]:
    matchers = SPAN_MATCHERS + ((HEADING_MATCHER,) if ignore_headings else ())
    alternation = "|".join(f"(?P<{m.kind}>{m.pattern})" for m in matchers)
    return re.compile(alternation, re.MULTILINE)


def protect_segments(body: str, ignore_headings: bool = False) -> list[Segment]:
    """Partition ``body`` into ordered segments covering it exactly once.

    Protected segments hold code, existing links, URLs, callouts and (with
    ``ignore_headings``) heading lines. A body that is nothing but one link is
    returned as a single protected segment.
    """
    if WHOLE_LINK.fullmatch(body):
        return [Segment(protected=True, content=body, start=0, kind="whole_link")]

    segments: list[Segment] = []
    last = 0
    for match in _compile(ignore_headings).finditer(body):
        if match.start() > last:
            segments.append(Segment(protected=False, content=body[last : match.start()], start=last))
        segments.append(Segment(protected=True, content=match.group(0), start=match.start(), kind=match.lastgroup))
        last = match.end()
    if last < len(body):
        segments.append(Segment(protected=False, content=body[last:], start=last))
    return segments
