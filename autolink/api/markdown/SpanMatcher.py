"""Named pattern for one kind of protected span (UNO: single class)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpanMatcher:
    kind: str
    pattern: str
