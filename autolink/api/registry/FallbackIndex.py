"""Shorthand fallback index (UNO: single class)."""

from collections.abc import Mapping
from dataclasses import dataclass

from .Candidate import Candidate

FallbackEntry = tuple[str, Candidate]


@dataclass(frozen=True)
class FallbackIndex:
    """Maps a last path segment to every full path key ending with it."""

    entries: Mapping[str, tuple[FallbackEntry, ...]]
    ignore_case: bool
    max_key_length: int

    def get(self, shorthand: str) -> tuple[FallbackEntry, ...]:
        return self.entries.get(shorthand.lower() if self.ignore_case else shorthand, ())

    def __contains__(self, shorthand: str) -> bool:
        return bool(self.get(shorthand))
