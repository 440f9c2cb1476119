import pytest

from algokit.pascal import generate, sort_by_second


def test_fifth_row():
    assert generate(5)[-1] == [1, 4, 6, 4, 1]


def test_zero_rows():
    assert generate(0) == []


def test_negative_rows_rejected():
    with pytest.raises(ValueError):
        generate(-1)


@pytest.mark.parametrize("count", [1, 2, 7, 15])
def test_row_invariants(count):
    rows = generate(count)
    assert len(rows) == count
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert row == row[::-1]
        assert sum(row) == 2 ** i
        assert row[0] == row[-1] == 1


def test_rows_follow_recurrence():
    rows = generate(12)
    for above, row in zip(rows, rows[1:]):
        for j in range(1, len(row) - 1):
            assert row[j] == above[j - 1] + above[j]


def test_sort_by_second_source_example():
    assert sort_by_second([(1, 3), (2, 1), (3, 2)]) == [(1, 3), (3, 2), (2, 1)]


def test_sort_by_second_keeps_tie_order():
    result = sort_by_second([("a", 1), ("b", 2), ("c", 1), ("d", 2)])
    assert result == [("b", 2), ("d", 2), ("a", 1), ("c", 1)]


def test_sort_by_second_is_descending_permutation():
    pairs = [(i, (i * 37) % 11) for i in range(30)]
    result = sort_by_second(pairs)
    seconds = [second for _, second in result]
    assert seconds == sorted(seconds, reverse=True)
    assert sorted(result) == sorted(pairs)