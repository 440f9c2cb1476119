import pytest

from algokit.dynarray import DynamicArray


def test_append_keeps_order_and_capacity_covers_size():
    arr = DynamicArray()
    for value in (1, 2, 3, 4, 5):
        arr.append(value)
        assert arr.capacity() >= len(arr)
    assert list(arr) == [1, 2, 3, 4, 5]
    assert [arr[i] for i in range(len(arr))] == [1, 2, 3, 4, 5]


def test_first_growth_gives_capacity_two():
    arr = DynamicArray()
    arr.append(1)
    assert arr.capacity() == 2


def test_capacity_doubles_when_full():
    arr = DynamicArray([1, 2])
    before = arr.capacity()
    arr.append(3)
    assert arr.capacity() == 2 * before


def test_erase_even_values():
    arr = DynamicArray([1, 2, 30, 4, 5, 6])
    i = 0
    while i < len(arr):
        if arr[i] % 2 == 0:
            arr.erase(i)
        else:
            i += 1
    assert list(arr) == [1, 5]


def test_reserve_and_resize():
    arr = DynamicArray()
    arr.reserve(10)
    for value in range(1, 8):
        arr.append(value)
    assert arr.capacity() == 10

    arr.resize(4)
    assert list(arr) == [1, 2, 3, 4]
    assert arr.capacity() == 10

    arr.resize(8, 0)
    assert list(arr) == [1, 2, 3, 4, 0, 0, 0, 0]
    assert arr.capacity() == 10

    arr.resize(12, 250)
    assert list(arr) == [1, 2, 3, 4, 0, 0, 0, 0, 250, 250, 250, 250]
    assert arr.capacity() == 12


def test_reserve_never_shrinks():
    arr = DynamicArray()
    arr.reserve(10)
    arr.reserve(3)
    assert arr.capacity() == 10


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        DynamicArray([1]).resize(-1)


def test_copy_is_independent():
    original = DynamicArray([1, 2, 3, 4, 5])
    duplicate = DynamicArray(original)
    assert duplicate == original
    duplicate[0] = 100
    assert list(original) == [1, 2, 3, 4, 5]
    assert duplicate != original


def test_strings_round_trip():
    words = ["111", "222", "333", "444", "555"]
    assert list(DynamicArray(words)) == words


def test_insert_in_middle_and_front():
    arr = DynamicArray(["b", "d"])
    arr.insert(1, "c")
    arr.insert(0, "a")
    arr.insert(len(arr), "e")
    assert list(arr) == ["a", "b", "c", "d", "e"]


def test_insert_out_of_range_raises():
    with pytest.raises(IndexError):
        DynamicArray([1]).insert(2, 5)


def test_pop_returns_last_and_empty_raises():
    arr = DynamicArray([1, 2])
    assert arr.pop() == 2
    assert arr.pop() == 1
    with pytest.raises(IndexError):
        arr.pop()


def test_index_checks_and_negative_indices():
    arr = DynamicArray([1, 2, 3])
    assert arr[-1] == 3
    arr[-1] = 9
    assert list(arr) == [1, 2, 9]
    with pytest.raises(IndexError):
        arr[3]
    with pytest.raises(IndexError):
        arr[-4] = 0


def test_erase_out_of_range_raises():
    with pytest.raises(IndexError):
        DynamicArray().erase(0)