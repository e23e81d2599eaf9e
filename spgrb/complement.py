"""Boolean views of the positions a container does not hold as true."""

from __future__ import annotations

import itertools
import numbers
import operator
from typing import Any, Iterator, Optional, Tuple, Union

from .index import Index


def _as_index(key: Any) -> Index:
    if isinstance(key, Index):
        return key
    first, second = key
    return Index(first, second)


def _is_set(entry: Optional[Tuple[Any, Any]]) -> bool:
    return entry is not None and bool(entry[1])


class ComplementVectorView:
    """Holds ``True`` at every index where the vector has no truthy value."""

    def __init__(self, vector: Any) -> None:
        self._vector = vector

    @property
    def shape(self) -> int:
        return self._vector.shape

    def __len__(self) -> int:
        falsy = sum(1 for _, value in self._vector if not value)
        return self.shape - len(self._vector) + falsy

    def __iter__(self) -> Iterator[Tuple[int, bool]]:
        for index in range(self.shape):
            if not _is_set(self._vector.find(index)):
                yield index, True

    def find(self, key: Any) -> Optional[Tuple[int, bool]]:
        """Return ``(key, True)`` when the key is in the complement, else None."""
        key = operator.index(key)
        if not 0 <= key < self.shape:
            return None
        if _is_set(self._vector.find(key)):
            return None
        return key, True


class ComplementMatrixView:
    """Holds ``True`` at every position where the matrix has no truthy value."""

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    @property
    def shape(self) -> Index:
        return _as_index(self._matrix.shape)

    def __len__(self) -> int:
        rows, cols = self.shape
        falsy = sum(1 for _, value in self._matrix if not value)
        return rows * cols - len(self._matrix) + falsy

    def __iter__(self) -> Iterator[Tuple[Index, bool]]:
        rows, cols = self.shape
        for i, j in itertools.product(range(rows), range(cols)):
            key = Index(i, j)
            if not _is_set(self._matrix.find(key)):
                yield key, True

    def find(self, key: Any) -> Optional[Tuple[Index, bool]]:
        """Return ``(key, True)`` when the key is in the complement, else None."""
        key = _as_index(key)
        rows, cols = self.shape
        if not (0 <= key.first < rows and 0 <= key.second < cols):
            return None
        if _is_set(self._matrix.find(key)):
            return None
        return key, True


def complement(container: Any) -> Union[ComplementVectorView, ComplementMatrixView]:
    """Return the complement view suited to a vector or a matrix."""
    if isinstance(container.shape, numbers.Integral):
        return ComplementVectorView(container)
    return ComplementMatrixView(container)