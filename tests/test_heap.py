import operator
import random

import pytest

from algokit.heap import PriorityQueue, find_kth_largest, heap_sort


def test_heap_sort_source_example():
    assert heap_sort([4, 2, 1, 6, 7, 9, 3, 0, 5, 8]) == list(range(10))


@pytest.mark.parametrize("data", [[], [1], [2, 1], [3, 3, 3], [5, -1, 5, 0, -7]])
def test_heap_sort_small_cases(data):
    assert heap_sort(data) == sorted(data)


def test_heap_sort_random_matches_sorted():
    rng = random.Random(7)
    for _ in range(50):
        data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 60))]
        assert heap_sort(data) == sorted(data)


def test_heap_sort_leaves_input_untouched():
    data = [3, 1, 2]
    heap_sort(data)
    assert data == [3, 1, 2]


def test_kth_largest_matches_sorted():
    rng = random.Random(3)
    nums = [rng.randint(0, 50) for _ in range(30)]
    for k in range(1, len(nums) + 1):
        assert find_kth_largest(nums, k) == sorted(nums, reverse=True)[k - 1]


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_largest_rejects_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


def test_priority_queue_default_is_max_heap():
    data = [3, 1, 8, 4, 2]
    pq = PriorityQueue()
    for x in data:
        pq.push(x)
    out = []
    while pq:
        out.append(pq.top())
        pq.pop()
    assert out == sorted(data, reverse=True)


def test_priority_queue_greater_is_min_heap():
    data = [3, 1, 8, 4, 2]
    pq = PriorityQueue(data, compare=operator.gt)
    out = [pq.pop() for _ in range(len(pq))]
    assert out == sorted(data)


def test_priority_queue_len_and_bool():
    pq = PriorityQueue([5, 6])
    assert len(pq) == 2
    assert pq.pop() == 6
    assert pq.pop() == 5
    assert len(pq) == 0
    assert not pq


def test_priority_queue_empty_errors():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.top()


def test_priority_queue_random_order_invariant():
    rng = random.Random(11)
    data = [rng.randint(-20, 20) for _ in range(100)]
    pq = PriorityQueue(data)
    out = [pq.pop() for _ in range(len(data))]
    assert out == sorted(data, reverse=True)