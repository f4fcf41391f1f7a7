"""Span of a document body (UNO: single class)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    protected: bool
    content: str
    start: int
    kind: str | None = None

    @property
    def end(self) -> int:
        return self.start + len(self.content)
