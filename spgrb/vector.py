"""Sparse vector backed by dense storage with presence flags."""

from __future__ import annotations

import itertools
import operator
from typing import Any, Iterable, Iterator, Optional, Tuple

Entry = Tuple[int, Any]


def _checked_shape(shape: Any) -> int:
    shape = operator.index(shape)
    if shape < 0:
        raise ValueError(f"vector dimension must be non-negative, got {shape}")
    return shape


class Vector:
    """A vector of fixed dimension holding values at some of its indices.

    Iterating yields ``(index, value)`` pairs in increasing index order.
    """

    def __init__(self, shape: Any) -> None:
        size = _checked_shape(shape)
        self._data: list[Any] = [None] * size
        self._flags: list[bool] = [False] * size
        self._nnz = 0

    @classmethod
    def from_entries(cls, other: Any) -> "Vector":
        """Build a vector with the shape and stored entries of ``other``."""
        vector = cls(other.shape)
        vector.insert_many(other)
        return vector

    @property
    def shape(self) -> int:
        """The dimension of the vector."""
        return len(self._data)

    def __len__(self) -> int:
        return self._nnz

    def __iter__(self) -> Iterator[Entry]:
        return itertools.compress(enumerate(self._data), self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.shape == other.shape and list(self) == list(other)

    def __repr__(self) -> str:
        return f"Vector(shape={self.shape}, nnz={len(self)})"

    def _checked(self, index: Any) -> int:
        index = operator.index(index)
        if not 0 <= index < self.shape:
            raise IndexError(f"index {index} is outside a vector of dimension {self.shape}")
        return index

    def __contains__(self, index: Any) -> bool:
        try:
            index = self._checked(index)
        except (TypeError, IndexError):
            return False
        return self._flags[index]

    def find(self, index: Any) -> Optional[Entry]:
        """Return the stored ``(index, value)`` entry, or None."""
        if index not in self:
            return None
        index = operator.index(index)
        return index, self._data[index]

    def __getitem__(self, index: Any) -> Any:
        index = self._checked(index)
        if not self._flags[index]:
            raise KeyError(index)
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.insert_or_assign(index, value)

    def insert(self, entry: Tuple[Any, Any]) -> Tuple[Entry, bool]:
        """Insert ``(index, value)`` unless the index is already stored.

        Returns the stored entry and whether an insertion took place.
        """
        raw_index, value = entry
        index = self._checked(raw_index)
        if self._flags[index]:
            return (index, self._data[index]), False
        self._flags[index] = True
        self._data[index] = value
        self._nnz += 1
        return (index, value), True

    def insert_many(self, entries: Iterable[Tuple[Any, Any]]) -> None:
        """Insert many entries; indices already stored keep their value."""
        for entry in entries:
            self.insert(entry)

    def insert_or_assign(self, index: Any, value: Any) -> Tuple[Entry, bool]:
        """Store ``value`` at ``index``, replacing any stored value.

        Returns the stored entry and whether the index was newly inserted.
        """
        index = self._checked(index)
        inserted = not self._flags[index]
        if inserted:
            self._flags[index] = True
            self._nnz += 1
        self._data[index] = value
        return (index, value), inserted

    def reshape(self, shape: Any) -> None:
        """Change the dimension, dropping entries beyond the new end."""
        size = _checked_shape(shape)
        if size < self.shape:
            del self._data[size:]
            del self._flags[size:]
            self._nnz = sum(self._flags)
        else:
            grow = size - self.shape
            self._data.extend([None] * grow)
            self._flags.extend([False] * grow)

    def clear(self) -> None:
        """Remove every stored entry, keeping the dimension."""
        size = self.shape
        self._data = [None] * size
        self._flags = [False] * size
        self._nnz = 0