import itertools

from spgrb.complement import ComplementMatrixView, ComplementVectorView, complement
from spgrb.csr_matrix import CSRMatrix
from spgrb.index import Index
from spgrb.vector import Vector


def _vector():
    vector = Vector(6)
    vector[1] = True
    vector[3] = False
    vector[4] = 2
    return vector


def _matrix():
    matrix = CSRMatrix((3, 4))
    matrix[0, 1] = True
    matrix[1, 2] = 0
    matrix[2, 3] = 5
    return matrix


def test_complement_dispatches_on_container_kind():
    vector_view = complement(_vector())
    matrix_view = complement(_matrix())
    assert isinstance(vector_view, ComplementVectorView)
    assert isinstance(matrix_view, ComplementMatrixView)
    assert list(vector_view) == [(0, True), (2, True), (3, True), (5, True)]
    assert len(matrix_view) == 10
    assert (Index(0, 1), True) not in list(matrix_view)


def test_vector_complement_partitions_indices():
    vector = _vector()
    view = ComplementVectorView(vector)
    held = {i for i, value in vector if value}
    missing = {i for i, _ in view}
    assert held.isdisjoint(missing)
    assert held | missing == set(range(vector.shape))
    assert all(value is True for _, value in view)


def test_vector_complement_len_matches_iteration():
    view = ComplementVectorView(_vector())
    assert len(view) == len(list(view))


def test_vector_complement_falsy_value_counts_as_missing():
    view = ComplementVectorView(_vector())
    assert view.find(3) == (3, True)


def test_vector_complement_find():
    view = ComplementVectorView(_vector())
    assert view.find(1) is None
    assert view.find(4) is None
    assert view.find(0) == (0, True)
    assert view.find(6) is None
    assert view.shape == 6


def test_matrix_complement_partitions_positions():
    matrix = _matrix()
    view = ComplementMatrixView(matrix)
    rows, cols = matrix.shape
    held = {key for key, value in matrix if value}
    missing = {key for key, _ in view}
    every = {Index(i, j) for i, j in itertools.product(range(rows), range(cols))}
    assert held.isdisjoint(missing)
    assert held | missing == every


def test_matrix_complement_len_and_order():
    view = ComplementMatrixView(_matrix())
    keys = [key for key, _ in view]
    assert len(view) == len(keys)
    assert keys == sorted(keys)


def test_matrix_complement_find():
    view = ComplementMatrixView(_matrix())
    assert view.find((0, 1)) is None
    assert view.find((2, 3)) is None
    assert view.find((1, 2)) == (Index(1, 2), True)
    assert view.find((0, 0)) == (Index(0, 0), True)
    assert view.find((3, 0)) is None


def test_complement_of_empty_vector_is_everything():
    vector = Vector(4)
    view = complement(vector)
    assert [i for i, _ in view] == list(range(vector.shape))
    assert len(view) == vector.shape