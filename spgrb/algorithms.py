"""Semiring multiplication, row reduction and permutation of sparse containers."""

from __future__ import annotations

import numbers
import operator
from collections import defaultdict
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

from .csr_matrix import CSRMatrix
from .index import Index
from .ops import multiplies, plus
from .vector import Vector

BinaryFn = Callable[[Any, Any], Any]


def _is_vector(container: Any) -> bool:
    return isinstance(container.shape, numbers.Integral)


def _allowed(mask: Any, key: Any) -> bool:
    if mask is None:
        return True
    entry = mask.find(key)
    return entry is not None and bool(entry[1])


class _Transposed:
    """A read-only transposed view of a matrix."""

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    @property
    def shape(self) -> Index:
        rows, cols = self._matrix.shape
        return Index(cols, rows)

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[Tuple[Index, Any]]:
        for (i, j), value in self._matrix:
            yield Index(j, i), value

    def find(self, key: Any) -> Optional[Tuple[Index, Any]]:
        i, j = key
        entry = self._matrix.find(Index(j, i))
        if entry is None:
            return None
        return Index(i, j), entry[1]


def _matrix_vector(a: Any, b: Any, reduce: BinaryFn, combine: BinaryFn,
                   mask: Any) -> Vector:
    c = Vector(a.shape[0])
    for (i, k), a_v in a:
        found = b.find(k)
        if found is None or not _allowed(mask, i):
            continue
        combined = combine(a_v, found[1])
        (_, current), inserted = c.insert((i, combined))
        if not inserted:
            c.insert_or_assign(i, reduce(current, combined))
    return c


def _matrix_matrix(a: Any, b: Any, reduce: BinaryFn, combine: BinaryFn,
                   mask: Any) -> CSRMatrix:
    b_rows: dict[int, list[Tuple[int, Any]]] = defaultdict(list)
    for (k, j), b_v in b:
        b_rows[k].append((j, b_v))
    for row in b_rows.values():
        row.sort(key=operator.itemgetter(0))

    accumulated: dict[Index, Any] = {}
    for (i, k), a_v in a:
        for j, b_v in b_rows.get(k, ()):
            key = Index(i, j)
            if not _allowed(mask, key):
                continue
            combined = combine(a_v, b_v)
            if key in accumulated:
                accumulated[key] = reduce(accumulated[key], combined)
            else:
                accumulated[key] = combined

    c = CSRMatrix(Index(a.shape[0], b.shape[1]))
    c.insert_many(accumulated.items())
    return c


def _dot(a: Any, b: Any, reduce: BinaryFn, combine: BinaryFn) -> Any:
    identity = getattr(reduce, "identity", None)
    if identity is None:
        raise TypeError("reducing two vectors to a scalar needs a monoid reduce operator")
    result = None
    for index, value in a:
        found = b.find(index)
        if found is None:
            continue
        combined = combine(value, found[1])
        if result is None:
            result = identity(type(combined))
        result = reduce(result, combined)
    return identity(float) if result is None else result


def multiply(a: Any, b: Any, reduce: BinaryFn = plus,
             combine: BinaryFn = multiplies, mask: Any = None) -> Any:
    """Multiply matrices and vectors over the semiring ``(reduce, combine)``.

    Matrix times vector and vector times matrix give a vector, matrix times
    matrix gives a matrix and vector times vector gives a scalar. ``mask``
    restricts which output positions are computed: only those where it holds
    a truthy value. Masks do not apply to the vector-vector product.
    """
    a_vector, b_vector = _is_vector(a), _is_vector(b)
    if a_vector and b_vector:
        if mask is not None:
            raise TypeError("a mask cannot be applied to a vector-vector product")
        return _dot(a, b, reduce, combine)
    if a_vector:
        return _matrix_vector(_Transposed(b), a, reduce, combine, mask)
    if b_vector:
        return _matrix_vector(a, b, reduce, combine, mask)
    return _matrix_matrix(a, b, reduce, combine, mask)


def reduce(a: Any, op: BinaryFn = plus, mask: Any = None) -> Vector:
    """Reduce each row of matrix ``a`` with ``op`` into a vector.

    Rows that the mask does not store are skipped; rows without entries are
    left empty in the result.
    """
    v = Vector(a.shape[0])
    for (row, _col), a_v in a:
        if mask is not None and mask.find(row) is None:
            continue
        value = a_v
        existing = v.find(row)
        if existing is not None:
            value = op(value, existing[1])
        v.insert_or_assign(row, value)
    return v


def _projection(permutation: Sequence[Any], size: int) -> list[list[int]]:
    proj: list[list[int]] = [[] for _ in range(size)]
    for position, source in enumerate(permutation):
        source = operator.index(source)
        if not 0 <= source < size:
            raise IndexError(f"permutation entry {source} is outside 0..{size - 1}")
        proj[source].append(position)
    return proj


def permute(matrix: Any, row_permutation: Sequence[Any],
            column_permutation: Optional[Sequence[Any]] = None) -> CSRMatrix:
    """Return a matrix whose row ``p`` is row ``row_permutation[p]`` of ``matrix``.

    Columns are treated the same way with ``column_permutation``, which
    defaults to the row permutation. An index may appear several times in a
    permutation, duplicating that row or column.
    """
    rows, cols = matrix.shape
    if column_permutation is None:
        column_permutation = row_permutation
        row_size = col_size = max(rows, cols)
    else:
        row_size, col_size = rows, cols

    row_proj = _projection(row_permutation, row_size)
    col_proj = _projection(column_permutation, col_size)

    out = CSRMatrix(Index(len(row_permutation), len(column_permutation)))
    out.insert_many(
        (Index(new_i, new_j), value)
        for (i, j), value in matrix
        for new_i in row_proj[i]
        for new_j in col_proj[j]
    )
    return out