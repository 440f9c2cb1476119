"""Pascal's triangle and ordering pairs by their second item."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def generate(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("number of rows must not be negative")
    rows: list[list[int]] = []
    for i in range(num_rows):
        if i == 0:
            rows.append([1])
            continue
        above = rows[-1]
        rows.append([1] + [a + b for a, b in zip(above, above[1:])] + [1])
    return rows


def sort_by_second(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Pairs ordered by their second item, largest first; ties keep their order."""
    return sorted(pairs, key=lambda pair: pair[1], reverse=True)