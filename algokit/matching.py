"""String matching (KMP and naive), substring replacement and matrix saddle points."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_table(pattern: str) -> list[int]:
    """Length of the longest proper prefix that is also a suffix, for each prefix."""
    table = [0] * len(pattern)
    length = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while length > 0 and ch != pattern[length]:
            length = table[length - 1]
        if ch == pattern[length]:
            length += 1
        table[i] = length
    return table


def _check_pos(pos: int) -> None:
    if pos < 0:
        raise ValueError(f"start position must not be negative, got {pos}")


def kmp_search(haystack: str, needle: str, pos: int = 0) -> int:
    """Index of the first ``needle`` at or after ``pos``; -1 if none, 0 for an empty needle."""
    _check_pos(pos)
    if not needle:
        return 0
    table = prefix_table(needle)
    matched = 0
    for i, ch in enumerate(haystack[pos:], start=pos):
        while matched > 0 and ch != needle[matched]:
            matched = table[matched - 1]
        if ch == needle[matched]:
            matched += 1
        if matched == len(needle):
            return i - len(needle) + 1
    return -1


def naive_search(haystack: str, needle: str, pos: int = 0) -> int:
    """Brute-force counterpart of :func:`kmp_search`."""
    _check_pos(pos)
    if not needle:
        return 0
    width = len(needle)
    for start in range(pos, len(haystack) - width + 1):
        if haystack[start:start + width] == needle:
            return start
    return -1


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping ``old``, scanning left to right."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    parts = []
    start = 0
    while (found := kmp_search(text, old, start)) != -1:
        parts.append(text[start:found])
        parts.append(new)
        start = found + len(old)
    parts.append(text[start:])
    return "".join(parts)


def saddle_points(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """(row, col, value) of entries that are the minimum of their row and maximum of their column.

    Indices are zero-based; points come in row-major order.
    """
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    points = []
    for i, row in enumerate(rows):
        if not row:
            continue
        lowest = min(row)
        for j, value in enumerate(row):
            if value == lowest and all(other[j] <= lowest for other in rows):
                points.append((i, j, value))
    return points