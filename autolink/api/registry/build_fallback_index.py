"""Build the shorthand fallback index for a registry (UNO: single function)."""

import logging
from types import MappingProxyType

from .CandidateRegistry import CandidateRegistry
from .FallbackIndex import FallbackEntry, FallbackIndex

logger = logging.getLogger(__name__)


def build_fallback_index(registry: CandidateRegistry, ignore_case: bool) -> FallbackIndex:
    """Index full path keys of ``registry`` by their last segment."""
    grouped: dict[str, list[FallbackEntry]] = {}
    for key, candidate in registry.candidate_map.items():
        if key != candidate.path or "/" not in key:
            continue
        shorthand = key.rsplit("/", 1)[1]
        if ignore_case:
            shorthand = shorthand.lower()
        grouped.setdefault(shorthand, []).append((key, candidate))

    max_key_length = max((len(k) for k in grouped), default=0)
    logger.debug("Built fallback index: %d shorthands", len(grouped))
    return FallbackIndex(
        entries=MappingProxyType({k: tuple(v) for k, v in grouped.items()}),
        ignore_case=ignore_case,
        max_key_length=max_key_length,
    )
