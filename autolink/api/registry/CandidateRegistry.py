"""Immutable candidate registry (UNO: single class)."""

from collections.abc import Mapping
from dataclasses import dataclass

from .Candidate import Candidate
from .RejectedDescriptor import RejectedDescriptor
from .TrieNode import TrieNode


@dataclass(frozen=True, eq=False)
class CandidateRegistry:
    """Trie plus candidate map built once from page descriptors.

    Instances are never mutated after construction and may be shared between
    scans. Identity is the registry version: a rebuild produces a new object.
    """

    trie: TrieNode
    candidate_map: Mapping[str, Candidate]
    base_dir: str | None = None
    ignore_case: bool = False
    rejected: tuple[RejectedDescriptor, ...] = ()
    page_count: int = 0

    def __len__(self) -> int:
        return len(self.candidate_map)

    def lookup(self, text: str) -> Candidate | None:
        """Return the candidate whose key matches ``text`` exactly."""
        node = self.trie
        for ch in text:
            child = node.children.get(ch.lower() if self.ignore_case else ch)
            if child is None:
                return None
            node = child
        if node.key is None:
            return None
        return self.candidate_map.get(node.key)
