"""Dynamic-programming classics: grid paths, integer break, BST counts, house robbing, knapsack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import accumulate


def unique_paths(m: int, n: int) -> int:
    """Monotone paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Monotone paths avoiding cells marked 1."""
    if not grid or not grid[0]:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    above = [1] + [0] * (width - 1)
    for cells in grid:
        left = 0
        current = []
        for up, cell in zip(above, cells):
            left = 0 if cell == 1 else up + left
            current.append(left)
        above = current
    return above[-1]


def integer_break(n: int) -> int:
    """Largest product of at least two positive integers summing to n."""
    if n < 2:
        raise ValueError("n must be at least 2")
    best = [0] * (n + 1)
    best[2] = 1
    for i in range(3, n + 1):
        best[i] = max(
            max(j * best[i - j], j * (i - j)) for j in range(1, i // 2 + 1)
        )
    return best[n]


def num_trees(n: int) -> int:
    """Number of structurally distinct binary search trees on n keys."""
    if n < 0:
        raise ValueError("n must not be negative")
    counts = [1] + [0] * n
    for size in range(1, n + 1):
        counts[size] = sum(
            counts[root - 1] * counts[size - root] for root in range(1, size + 1)
        )
    return counts[n]


def massage(nums: Iterable[int]) -> int:
    """Best total of bookings when no two adjacent ones may both be taken."""
    taken = skipped = 0
    for value in nums:
        taken, skipped = skipped + value, max(skipped, taken)
    return max(taken, skipped)


def rob(nums: Iterable[int]) -> int:
    """Most loot from a row of houses without robbing two neighbours."""
    return massage(nums)


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> tuple[int, int]:
    """0/1 knapsack over (volume, value) pairs.

    Returns the best value within ``capacity`` and the best value filling it
    exactly (0 when it cannot be filled exactly).
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    exact: list[int | None] = [0] + [None] * capacity
    for volume, value in items:
        if volume < 0:
            raise ValueError("item volume must not be negative")
        for j in range(capacity, max(volume, 1) - 1, -1):
            best[j] = max(best[j], best[j - volume] + value)
            previous = exact[j - volume]
            if previous is not None:
                candidate = previous + value
                if exact[j] is None or candidate > exact[j]:
                    exact[j] = candidate
    filled = exact[capacity]
    return best[capacity], filled if filled is not None else 0


def main(argv: list[str] | None = None) -> int:
    """Read ``n V`` and n ``volume value`` pairs from stdin; print both knapsack answers."""
    parser = argparse.ArgumentParser(
        prog="knapsack",
        description="Solve a 0/1 knapsack read from standard input.",
    )
    parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must be whitespace-separated integers")
    if len(numbers) < 2:
        parser.error("expected the item count and the capacity")
    count, capacity = numbers[0], numbers[1]
    pairs = numbers[2:2 + 2 * count]
    if count < 0 or len(pairs) < 2 * count:
        parser.error(f"expected {count} volume/value pairs")
    items = list(zip(pairs[::2], pairs[1::2]))
    best, exact = knapsack(items, capacity)
    print(best)
    print(exact)
    return 0