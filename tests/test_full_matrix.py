import pytest

from spgrb.full_matrix import FullMatrix, empty_matrix_mask, full_matrix_mask
from spgrb.index import Index


def test_len_is_product_of_dimensions():
    rows, cols = 2, 3
    matrix = FullMatrix((rows, cols), 5)
    assert len(matrix) == rows * cols


def test_iteration_covers_every_position_once_in_row_major_order():
    rows, cols = 3, 4
    matrix = FullMatrix((rows, cols), 7)
    entries = list(matrix)
    keys = [key for key, _ in entries]
    assert len(entries) == len(matrix)
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    assert all(0 <= i < rows and 0 <= j < cols for i, j in keys)
    assert all(value == 7 for _, value in entries)


def test_getitem_returns_value_and_rejects_out_of_bounds():
    matrix = FullMatrix((2, 2), 1.5)
    assert matrix[0, 1] == 1.5
    with pytest.raises(IndexError):
        matrix[2, 0]


def test_find_inside_and_outside():
    matrix = FullMatrix((3, 3), 9)
    assert matrix.find((1, 2)) == (Index(1, 2), 9)
    assert matrix.find((3, 0)) is None
    assert matrix.find((0, 3)) is None
    assert matrix.find((-1, 0)) is None


def test_contains():
    matrix = FullMatrix((2, 2), 0)
    assert (1, 1) in matrix
    assert (2, 1) not in matrix
    assert "bad" not in matrix


def test_negative_shape_rejected():
    with pytest.raises(ValueError):
        FullMatrix((-1, 2), 0)


def test_full_mask_finds_true():
    mask = full_matrix_mask((4, 4))
    assert mask.find((2, 3)) == (Index(2, 3), True)
    assert all(value is True for _, value in mask)


def test_empty_mask_finds_false():
    mask = empty_matrix_mask((4, 4))
    assert mask.find((2, 3)) == (Index(2, 3), False)
    assert mask.find((4, 4)) is None


def test_default_mask_is_effectively_unbounded():
    mask = full_matrix_mask()
    big = 10**9
    assert mask.find((big, big)) == (Index(big, big), True)