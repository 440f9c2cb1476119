"""Queue and stack adapters, and two stacks sharing one fixed capacity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_SHARED_CAPACITY = 55


class Queue(Generic[T]):
    """First-in first-out queue."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(iterable)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of an empty queue")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class Stack(Generic[T]):
    """Last-in first-out stack."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(iterable)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class SharedStack(Generic[T]):
    """Two stacks, numbered 1 and 2, drawing on one shared capacity."""

    def __init__(self, capacity: int = DEFAULT_SHARED_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._stacks: dict[int, list[T]] = {1: [], 2: []}

    def _stack(self, which: int) -> list[T]:
        try:
            return self._stacks[which]
        except KeyError:
            raise ValueError(f"stack number must be 1 or 2, got {which!r}") from None

    def length(self, which: int) -> int:
        return len(self._stack(which))

    def is_empty(self, which: int) -> bool:
        return not self._stack(which)

    def is_full(self) -> bool:
        return len(self._stacks[1]) + len(self._stacks[2]) >= self.capacity

    def push(self, which: int, item: T) -> None:
        stack = self._stack(which)
        if self.is_full():
            raise OverflowError("shared stack is full")
        stack.append(item)

    def pop(self, which: int) -> T:
        stack = self._stack(which)
        if not stack:
            raise IndexError(f"pop from empty stack {which}")
        return stack.pop()

    def top(self, which: int) -> T:
        stack = self._stack(which)
        if not stack:
            raise IndexError(f"top of empty stack {which}")
        return stack[-1]

    def drain(self, which: int) -> Iterator[T]:
        """Pop every item of one stack, yielding them top first."""
        stack = self._stack(which)
        while stack:
            yield stack.pop()