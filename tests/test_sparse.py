import pytest

from algokit.sparse import SparseMatrix, Triple


def test_render_format():
    matrix = SparseMatrix(3, 3, [Triple(1, 1, 5)])
    assert matrix.render() == "3 3 1\n(1,1,5)"


def test_render_empty():
    assert SparseMatrix(2, 4).render() == "2 4 0\n"


def test_parse_sorts_row_major():
    matrix = SparseMatrix.parse(3, 3, "(2,1,4)(1,2,3)")
    assert matrix.elements == (Triple(1, 2, 3), Triple(2, 1, 4))


def test_parse_render_round_trip():
    text = "(1,1,5)(1,3,-2)(3,2,7)"
    matrix = SparseMatrix.parse(4, 4, text)
    assert matrix.render() == f"4 4 3\n{text}"
    assert SparseMatrix.parse(4, 4, matrix.render().split("\n")[1]) == matrix


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        SparseMatrix.parse(2, 2, "(1,1,5) junk")


def test_add_then_subtract_restores():
    a = SparseMatrix.parse(3, 3, "(1,1,5)(2,2,3)(3,1,1)")
    b = SparseMatrix.parse(3, 3, "(1,1,2)(1,2,6)(3,3,4)")
    assert (a + b) - b == a
    assert a + b == b + a


def test_subtract_self_is_empty():
    a = SparseMatrix.parse(3, 3, "(1,1,5)(2,2,3)")
    assert len(a - a) == 0
    assert (a - a).elements == ()


def test_cancelling_entries_dropped():
    a = SparseMatrix.parse(2, 2, "(1,1,5)(2,2,3)")
    b = SparseMatrix.parse(2, 2, "(1,1,-5)")
    assert a.add(b).elements == (Triple(2, 2, 3),)


def test_subtract_negates_right_only_entries():
    a = SparseMatrix(2, 2)
    b = SparseMatrix.parse(2, 2, "(1,2,4)")
    assert a.subtract(b).elements == (Triple(1, 2, -4),)


def test_shape_mismatch():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2) + SparseMatrix(2, 3)