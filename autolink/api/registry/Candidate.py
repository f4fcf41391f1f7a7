"""Resolved link target for one matchable key."""

from dataclasses import dataclass
from typing import Literal

CandidateKind = Literal["exact", "alias", "shorthand"]


@dataclass(frozen=True)
class Candidate:
    """Link target stored in the registry's candidate map.

    ``canonical`` is the page path, or ``path|alias`` when the key came from
    an explicit alias.
    """

    canonical: str
    path: str
    namespace: str
    scoped: bool
    kind: CandidateKind

    @property
    def alias(self) -> str | None:
        if self.kind != "alias":
            return None
        return self.canonical.split("|", 1)[1]
