"""Split document frontmatter (UNO: single class)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Frontmatter:
    """Leading YAML block of a document.

    ``raw`` is the block exactly as written (delimiters included) so that
    ``raw + body`` reproduces the original text.
    """

    raw: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
