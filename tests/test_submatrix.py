import pytest

from spgrb.csr_matrix import CSRMatrix
from spgrb.index import Index
from spgrb.submatrix import SubmatrixView


def _matrix():
    matrix = CSRMatrix((4, 4))
    matrix[0, 0] = 1
    matrix[1, 1] = 2
    matrix[1, 3] = 3
    matrix[2, 0] = 4
    matrix[3, 2] = 5
    return matrix


def test_shape_is_range_lengths():
    view = SubmatrixView(_matrix(), (1, 3), (0, 2))
    assert view.shape == Index(2, 2)


def test_iteration_keeps_only_entries_in_range():
    view = SubmatrixView(_matrix(), (1, 3), (0, 2))
    assert list(view) == [(Index(1, 1), 2), (Index(2, 0), 4)]


def test_entries_are_a_subset_of_the_matrix():
    matrix = _matrix()
    view = SubmatrixView(matrix, (0, 2), (1, 4))
    for key, value in view:
        assert matrix[key] == value
        assert 0 <= key.first < 2 and 1 <= key.second < 4
    assert len(view) == len(list(view))


def test_full_range_view_equals_matrix():
    matrix = _matrix()
    rows, cols = matrix.shape
    view = SubmatrixView(matrix, (0, rows), (0, cols))
    assert list(view) == list(matrix)
    assert len(view) == len(matrix)


def test_find_inside_and_outside():
    matrix = _matrix()
    view = SubmatrixView(matrix, (1, 3), (0, 2))
    assert view.find((2, 0)) == matrix.find((2, 0))
    assert view.find((1, 3)) is None
    assert view.find((0, 0)) is None
    assert view.find((2, 1)) is None


def test_empty_range_has_no_entries():
    view = SubmatrixView(_matrix(), (2, 2), (0, 4))
    assert list(view) == []
    assert len(view) == 0


def test_reversed_range_rejected():
    with pytest.raises(ValueError):
        SubmatrixView(_matrix(), (3, 1), (0, 2))