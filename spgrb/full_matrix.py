"""A matrix view in which every position holds the same value."""

from __future__ import annotations

import itertools
import sys
from typing import Any, Iterator, Optional, Tuple

from .index import Index

Entry = Tuple[Index, Any]

_UNBOUNDED = Index(sys.maxsize, sys.maxsize)


def _as_index(key: Any) -> Index:
    if isinstance(key, Index):
        return key
    first, second = key
    return Index(first, second)


class FullMatrix:
    """A read-only matrix that stores ``value`` at every position.

    Without a shape, both dimensions are as large as the platform allows,
    which makes the matrix usable as an "everything" mask.
    """

    def __init__(self, shape: Any = None, value: Any = 0) -> None:
        self._shape = _UNBOUNDED if shape is None else _as_index(shape)
        if self._shape.first < 0 or self._shape.second < 0:
            raise ValueError(
                f"matrix dimensions must be non-negative, got {tuple(self._shape)}"
            )
        self._value = value

    @property
    def shape(self) -> Index:
        """The (rows, columns) dimensions of the matrix."""
        return self._shape

    @property
    def value(self) -> Any:
        """The value held at every position."""
        return self._value

    def __len__(self) -> int:
        return self._shape.first * self._shape.second

    def __iter__(self) -> Iterator[Entry]:
        positions = itertools.product(range(self._shape.first), range(self._shape.second))
        for i, j in positions:
            yield Index(i, j), self._value

    def __repr__(self) -> str:
        return f"FullMatrix(shape={tuple(self._shape)}, value={self._value!r})"

    def _in_bounds(self, key: Index) -> bool:
        return 0 <= key.first < self._shape.first and 0 <= key.second < self._shape.second

    def __contains__(self, key: Any) -> bool:
        try:
            key = _as_index(key)
        except (TypeError, ValueError):
            return False
        return self._in_bounds(key)

    def __getitem__(self, key: Any) -> Any:
        key = _as_index(key)
        if not self._in_bounds(key):
            raise IndexError(
                f"index {tuple(key)} is outside a matrix of shape {tuple(self._shape)}"
            )
        return self._value

    def find(self, key: Any) -> Optional[Entry]:
        """Return ``(Index, value)`` for a position inside the matrix, else None."""
        key = _as_index(key)
        if not self._in_bounds(key):
            return None
        return key, self._value


def full_matrix_mask(shape: Any = None) -> FullMatrix:
    """A mask that lets every position through."""
    return FullMatrix(shape, True)


def empty_matrix_mask(shape: Any = None) -> FullMatrix:
    """A mask that lets no position through."""
    return FullMatrix(shape, False)