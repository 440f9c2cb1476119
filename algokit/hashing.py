"""Integer hash tables (open addressing and separate chaining) and set/count helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

DEFAULT_SIZE = 10


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"table size must be positive, got {size}")


class OpenAddressingTable:
    """Fixed-size table of integer keys using ``key % size`` and linear probing."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self._slots: list[int | None] = [None] * size
        self._count = 0

    @property
    def size(self) -> int:
        return len(self._slots)

    def _home(self, key: int) -> int:
        return key % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it landed in."""
        if self._count >= self.size:
            raise OverflowError("hash table is full")
        address = self._home(key)
        while self._slots[address] is not None:
            address = (address + 1) % self.size
        self._slots[address] = key
        self._count += 1
        return address

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None when it is absent."""
        home = self._home(key)
        probe = home
        while self._slots[probe] != key:
            probe = (probe + 1) % self.size
            if self._slots[probe] is None or probe == home:
                return None
        return probe

    def __len__(self) -> int:
        return self._count

    def render(self) -> str:
        """Two tab-separated lines: slot numbers, then contents ('-' when empty)."""
        header = "\t".join(str(index) for index in range(self.size))
        values = "\t".join("-" if key is None else str(key) for key in self._slots)
        return f"{header}\n{values}"


class ChainedTable:
    """Fixed number of buckets; colliding keys go just after the bucket's first key."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self._buckets: list[list[int]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        return len(self._buckets)

    def insert(self, key: int) -> int:
        """Store ``key`` and return its bucket number."""
        address = key % self.size
        bucket = self._buckets[address]
        if bucket:
            bucket.insert(1, key)
        else:
            bucket.append(key)
        self._count += 1
        return address

    def search(self, key: int) -> int | None:
        """Return the bucket holding ``key``, or None when it is absent."""
        address = key % self.size
        return address if key in self._buckets[address] else None

    def bucket(self, address: int) -> list[int]:
        """The keys of one bucket, in chain order."""
        return list(self._buckets[address])

    def __len__(self) -> int:
        return self._count

    def render(self) -> str:
        """Bucket numbers, then one line per chain depth, blank where a chain is shorter."""
        lines = ["\t".join(str(index) for index in range(self.size))]
        depth = max(len(bucket) for bucket in self._buckets)
        for level in range(depth):
            lines.append(
                "\t".join(
                    str(bucket[level]) if level < len(bucket) else " "
                    for bucket in self._buckets
                )
            )
        return "\n".join(lines)


def is_anagram(s: str, t: str) -> bool:
    """True when ``t`` uses exactly the letters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Distinct values present in both, in order of first appearance in ``nums2``."""
    seen = set(nums1)
    result: dict[int, None] = {}
    for value in nums2:
        if value in seen:
            result[value] = None
    return list(result)


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Common values counted with multiplicity, in ``nums2`` order."""
    remaining = Counter(nums1)
    result = []
    for value in nums2:
        if remaining[value] > 0:
            remaining[value] -= 1
            result.append(value)
    return result