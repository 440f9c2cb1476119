"""A growable array that tracks its own capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Array storage that doubles its capacity when full, starting at 2."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._slots: list[Any] = []
        self._size = 0
        for value in iterable:
            self.append(value)

    def capacity(self) -> int:
        return len(self._slots)

    def reserve(self, n: int) -> None:
        """Grow the capacity to at least ``n``; never shrinks."""
        if n > len(self._slots):
            self._slots.extend([None] * (n - len(self._slots)))

    def resize(self, n: int, fill: T | None = None) -> None:
        """Truncate to ``n`` items, or pad with ``fill`` up to ``n``."""
        if n < 0:
            raise ValueError("size must not be negative")
        if n < self._size:
            for i in range(n, self._size):
                self._slots[i] = None
        else:
            self.reserve(n)
            for i in range(self._size, n):
                self._slots[i] = fill
        self._size = n

    def append(self, value: T) -> None:
        self.insert(self._size, value)

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._size:
            raise IndexError("pop from an empty array")
        return self.erase(self._size - 1)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` at ``index`` (0 to len), shifting later items right."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} out of range")
        if self._size == len(self._slots):
            self.reserve(2 if not self._slots else 2 * len(self._slots))
        self._slots[index + 1:self._size + 1] = self._slots[index:self._size]
        self._slots[index] = value
        self._size += 1

    def erase(self, index: int) -> T:
        """Remove and return the item at ``index``, shifting later items left."""
        if not 0 <= index < self._size:
            raise IndexError(f"erase position {index} out of range")
        value = self._slots[index]
        self._slots[index:self._size - 1] = self._slots[index + 1:self._size]
        self._size -= 1
        self._slots[self._size] = None
        return value

    def _position(self, index: int) -> int:
        position = index + self._size if index < 0 else index
        if not 0 <= position < self._size:
            raise IndexError(f"array index {index} out of range")
        return position

    def __getitem__(self, index: int) -> T:
        return self._slots[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._slots[self._position(index)] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"