"""Locate Markdown table rows in a body (UNO: single function)."""

from .TableIndex import TableIndex


def find_table_rows(body: str) -> TableIndex:
    """Index every line whose first non-blank character is a pipe."""
    ranges: list[tuple[int, int]] = []
    offset = 0
    for line in body.splitlines(keepends=True):
        if line.lstrip().startswith("|"):
            ranges.append((offset, offset + len(line)))
        offset += len(line)
    return TableIndex(ranges=tuple(ranges))
