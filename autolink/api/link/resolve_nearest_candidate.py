"""Pick the candidate closest to the current document (UNO: single function)."""

import math
from collections.abc import Sequence

from ..registry.FallbackIndex import FallbackEntry
from ..registry.strip_base_dir import strip_base_dir


def _dir_segments(path: str) -> list[str]:
    return path.split("/")[:-1]


def _common_prefix(a: list[str], b: list[str]) -> int:
    score = 0
    for x, y in zip(a, b):
        if x != y:
            break
        score += 1
    return score


def resolve_nearest_candidate(
    entries: Sequence[FallbackEntry], file_path: str, base_dir: str | None = None
) -> FallbackEntry:
    """Return the entry sharing the most leading directories with ``file_path``.

    Paths are compared relative to ``base_dir`` when under it. Ties go to the
    shallower candidate and then to the shorter key; for a document at the
    root of ``base_dir`` depth is measured inside ``base_dir`` and candidates
    outside it rank last. The earliest entry wins a full tie.

    Raises:
        ValueError: If ``entries`` is empty
    """
    if not entries:
        raise ValueError("No candidates to resolve")

    doc_dir = _dir_segments(strip_base_dir(file_path, base_dir))
    root_of_base = not doc_dir and base_dir is not None

    def tie_rank(key: str) -> tuple[float, int]:
        if root_of_base and not key.startswith(f"{base_dir}/"):
            return math.inf, len(key)
        return len(_dir_segments(strip_base_dir(key, base_dir))), len(key)

    best = entries[0]
    best_score = _common_prefix(_dir_segments(strip_base_dir(best[0], base_dir)), doc_dir)
    for entry in entries[1:]:
        score = _common_prefix(_dir_segments(strip_base_dir(entry[0], base_dir)), doc_dir)
        if score > best_score or (score == best_score and tie_rank(entry[0]) < tie_rank(best[0])):
            best, best_score = entry, score
    return best
