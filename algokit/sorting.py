"""Quicksort with Hoare partitioning and top-down merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def quicksort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order, using Hoare partitioning on the first element."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[low]
        i, j = low - 1, high + 1
        while i < j:
            i += 1
            while result[i] < pivot:
                i += 1
            j -= 1
            while result[j] > pivot:
                j -= 1
            if i < j:
                result[i], result[j] = result[j], result[i]
        pending.append((low, j))
        pending.append((j + 1, high))
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: list[T]) -> list[T]:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(_merge_sort(items[:mid]), _merge_sort(items[mid:]))


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return the items in ascending order; equal items keep their order."""
    return _merge_sort(list(items))