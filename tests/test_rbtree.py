import random

import pytest

from algokit.rbtree import Color, RedBlackTree


def _random_keys(seed, count, upper=100):
    rng = random.Random(seed)
    return [rng.randrange(upper) for _ in range(count)]


def test_iteration_is_sorted_distinct():
    keys = _random_keys(1, 40)
    tree = RedBlackTree(keys)
    assert list(tree) == sorted(set(keys))
    assert len(tree) == len(set(keys))


def test_duplicate_insert_is_ignored():
    tree = RedBlackTree([5, 3, 8])
    assert tree.insert(5) is False
    assert len(tree) == 3
    assert tree.insert(4) is True
    assert list(tree) == [3, 4, 5, 8]


def test_preorder_starts_with_black_root():
    tree = RedBlackTree(range(20))
    pairs = list(tree.preorder())
    assert pairs[0][1] is Color.BLACK
    assert sorted(key for key, _ in pairs) == list(range(20))


@pytest.mark.parametrize("seed", range(5))
def test_invariants_hold_during_inserts(seed):
    tree = RedBlackTree()
    for key in _random_keys(seed, 60, 1000):
        tree.insert(key)
        height = tree.black_height()
        assert 2 ** height - 1 <= len(tree)


@pytest.mark.parametrize("seed", range(5))
def test_invariants_hold_during_erases(seed):
    keys = list(set(_random_keys(seed, 80, 500)))
    tree = RedBlackTree(keys)
    rng = random.Random(seed + 100)
    rng.shuffle(keys)
    remaining = set(keys)
    for key in keys:
        assert tree.erase(key) is True
        remaining.discard(key)
        tree.black_height()
        assert list(tree) == sorted(remaining)
        assert key not in tree
    assert len(tree) == 0
    assert tree.render() == ""


def test_erase_absent_key_leaves_tree_unchanged():
    tree = RedBlackTree([10, 20, 30, 40])
    before = tree.render()
    assert tree.erase(25) is False
    assert tree.render() == before
    assert len(tree) == 4


def test_contains():
    tree = RedBlackTree([7, 1, 9])
    assert 7 in tree
    assert 2 not in tree


def test_ascending_inserts_stay_balanced():
    tree = RedBlackTree(range(1023))
    height = tree.black_height()
    assert 2 ** height - 1 <= len(tree)
    assert list(tree) == list(range(1023))


def test_empty_tree_black_height():
    tree = RedBlackTree()
    assert tree.black_height() == 0
    assert list(tree) == []