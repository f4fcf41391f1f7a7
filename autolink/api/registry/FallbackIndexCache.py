"""Per-registry cache of fallback indexes (UNO: single class)."""

import threading
import weakref

from .build_fallback_index import build_fallback_index
from .CandidateRegistry import CandidateRegistry
from .FallbackIndex import FallbackIndex


class FallbackIndexCache:
    """Holds one fallback index per (registry, case mode).

    Registries are held weakly, so dropping a registry also drops its indexes.
    Each index is built at most once.
    """

    def __init__(self) -> None:
        self._indexes: weakref.WeakKeyDictionary[CandidateRegistry, dict[bool, FallbackIndex]] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def get(self, registry: CandidateRegistry, ignore_case: bool) -> FallbackIndex:
        with self._lock:
            per_registry = self._indexes.setdefault(registry, {})
            index = per_registry.get(ignore_case)
            if index is None:
                index = build_fallback_index(registry, ignore_case)
                per_registry[ignore_case] = index
            return index

    def __len__(self) -> int:
        with self._lock:
            return sum(len(v) for v in self._indexes.values())
