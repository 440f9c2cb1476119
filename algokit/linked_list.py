"""Doubly linked lists built on a circular sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(Generic[T]):
    """A doubly linked circular list with a sentinel head node."""

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._head = _Node()
        self._size = 0
        for value in iterable:
            self.push_back(value)

    def _link_before(self, node: _Node, value: T) -> None:
        new = _Node(value)
        prev = node.prev
        prev.next = new
        new.prev = prev
        new.next = node
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _node_at(self, index: int) -> _Node:
        """The node at ``index``, walking from whichever end is nearer."""
        if not 0 <= index < self._size:
            raise IndexError(f"list index {index} out of range")
        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._head.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def push_back(self, value: T) -> None:
        self._link_before(self._head, value)

    def push_front(self, value: T) -> None:
        self._link_before(self._head.next, value)

    def pop_back(self) -> T:
        if not self._size:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head.prev)

    def pop_front(self) -> T:
        if not self._size:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head.next)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index`` (0 to len)."""
        if index == self._size:
            self._link_before(self._head, value)
        else:
            self._link_before(self._node_at(index), value)

    def remove_at(self, index: int) -> T:
        """Remove and return the value at ``index``."""
        return self._unlink(self._node_at(index))

    def clear(self) -> None:
        self._head.next = self._head
        self._head.prev = self._head
        self._size = 0

    def copy(self) -> LinkedList[T]:
        return LinkedList(self)

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._head.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class IndexedList(Generic[T]):
    """A list addressed by position, where out-of-range additions and deletions are ignored."""

    def __init__(self) -> None:
        self._list: LinkedList[T] = LinkedList()

    def get(self, index: int) -> T:
        """The value at ``index``; IndexError when there is none."""
        return self._list._node_at(index).value

    def add_at_head(self, value: T) -> None:
        self.add_at_index(0, value)

    def add_at_tail(self, value: T) -> None:
        self.add_at_index(len(self._list), value)

    def add_at_index(self, index: int, value: T) -> None:
        """Insert before position ``index``; ignored unless 0 <= index <= len."""
        if 0 <= index <= len(self._list):
            self._list.insert(index, value)

    def delete_at_index(self, index: int) -> None:
        """Remove the value at ``index``; ignored when out of range."""
        if 0 <= index < len(self._list):
            self._list.remove_at(index)

    def __iter__(self) -> Iterator[T]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._list)!r})"