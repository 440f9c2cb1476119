"""Sparse matrices stored as sorted (row, col, value) triples."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_TRIPLE = re.compile(r"\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")


@dataclass(frozen=True)
class Triple:
    """One stored entry of a sparse matrix."""

    row: int
    col: int
    val: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col},{self.val})"


class SparseMatrix:
    """A matrix of the given shape holding only its listed entries, in row-major order."""

    def __init__(self, rows: int, cols: int, elements: Iterable[Triple] = ()) -> None:
        self.rows = rows
        self.cols = cols
        self._elements = tuple(sorted(elements, key=lambda t: t.position))

    @classmethod
    def parse(cls, rows: int, cols: int, text: str) -> SparseMatrix:
        """Build a matrix from text such as ``"(1,1,5)(2,3,-4)"``."""
        if _TRIPLE.sub("", text).strip():
            raise ValueError(f"cannot parse triples from {text!r}")
        elements = (
            Triple(int(r), int(c), int(v)) for r, c, v in _TRIPLE.findall(text)
        )
        return cls(rows, cols, elements)

    @property
    def elements(self) -> tuple[Triple, ...]:
        return self._elements

    def _combine(self, other: SparseMatrix, sign: int) -> SparseMatrix:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )
        left, right = self._elements, other._elements
        result: list[Triple] = []
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.position == b.position:
                total = a.val + sign * b.val
                if total != 0:
                    result.append(Triple(a.row, a.col, total))
                i += 1
                j += 1
            elif a.position < b.position:
                result.append(a)
                i += 1
            else:
                result.append(Triple(b.row, b.col, sign * b.val))
                j += 1
        result.extend(left[i:])
        result.extend(Triple(b.row, b.col, sign * b.val) for b in right[j:])
        return SparseMatrix(self.rows, self.cols, result)

    def add(self, other: SparseMatrix) -> SparseMatrix:
        return self._combine(other, 1)

    def subtract(self, other: SparseMatrix) -> SparseMatrix:
        return self._combine(other, -1)

    def __add__(self, other: SparseMatrix) -> SparseMatrix:
        return self.add(other)

    def __sub__(self, other: SparseMatrix) -> SparseMatrix:
        return self.subtract(other)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows, self.cols, self._elements) == (
            other.rows,
            other.cols,
            other._elements,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}, {self.cols}, {list(self._elements)!r})"

    def render(self) -> str:
        """Shape and entry count on one line, then the triples."""
        header = f"{self.rows} {self.cols} {len(self)}"
        return header + "\n" + "".join(str(t) for t in self._elements)