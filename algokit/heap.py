"""Binary heaps: heap sort, a comparator-driven priority queue and k-th largest."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], bool]


def _sift_down(heap: list, size: int, root: int, compare: Compare) -> None:
    """Restore the heap property below ``root`` within the first ``size`` slots.

    ``compare(a, b)`` is true when ``a`` belongs lower in the heap than ``b``.
    """
    parent = root
    child = parent * 2 + 1
    while child < size:
        right = child + 1
        if right < size and compare(heap[child], heap[right]):
            child = right
        if not compare(heap[parent], heap[child]):
            break
        heap[parent], heap[child] = heap[child], heap[parent]
        parent = child
        child = parent * 2 + 1


def _sift_up(heap: list, child: int, compare: Compare) -> None:
    while child > 0:
        parent = (child - 1) // 2
        if not compare(heap[parent], heap[child]):
            break
        heap[parent], heap[child] = heap[child], heap[parent]
        child = parent


def heap_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, sorted with a max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root, operator.lt)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0, operator.lt)
    return result


def find_kth_largest(nums: Sequence[T], k: int) -> T:
    """Return the k-th largest value (1-based) using a min-heap of size k."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


class PriorityQueue(Generic[T]):
    """A heap whose order is set by ``compare``.

    With the default ``operator.lt`` the largest item is on top; pass
    ``operator.gt`` for a min-queue.
    """

    def __init__(self, iterable: Iterable[T] = (), compare: Compare = operator.lt) -> None:
        self._compare = compare
        self._items: list[T] = []
        for item in iterable:
            self.push(item)

    def push(self, item: T) -> None:
        self._items.append(item)
        _sift_up(self._items, len(self._items) - 1, self._compare)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        _sift_down(items, len(items), 0, self._compare)
        return top

    def top(self) -> T:
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"