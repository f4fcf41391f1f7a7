"""Offsets of Markdown table rows (UNO: single class)."""

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class TableIndex:
    """Sorted, non-overlapping ``(start, end)`` ranges of table lines."""

    ranges: tuple[tuple[int, int], ...] = ()

    def contains(self, offset: int) -> bool:
        pos = bisect_right(self.ranges, (offset, float("inf"))) - 1
        if pos < 0:
            return False
        start, end = self.ranges[pos]
        return start <= offset < end

    def __bool__(self) -> bool:
        return bool(self.ranges)
