"""Sparse matrix stored in compressed sparse row (CSR) form."""

from __future__ import annotations

import itertools
from bisect import bisect_left
from typing import Any, Iterable, Iterator, Optional, Tuple

from .index import Index

Entry = Tuple[Index, Any]

_INDEX_BYTES = 8
_VALUE_BYTES = 8
_BITS_PER_BYTE = 8


def _as_index(key: Any) -> Index:
    if isinstance(key, Index):
        return key
    first, second = key
    return Index(first, second)


def _checked_shape(shape: Any) -> Index:
    shape = _as_index(shape)
    if shape.first < 0 or shape.second < 0:
        raise ValueError(f"matrix dimensions must be non-negative, got {tuple(shape)}")
    return shape


class CSRMatrix:
    """A sparse matrix whose stored entries are kept sorted in row-major order.

    Iterating yields ``(Index, value)`` pairs. Within each row the column
    indices are kept sorted, so lookups use binary search.
    """

    def __init__(self, shape: Any) -> None:
        self._shape = _checked_shape(shape)
        self._rowptr = [0] * (self._shape.first + 1)
        self._colind: list[int] = []
        self._values: list[Any] = []

    @property
    def shape(self) -> Index:
        """The (rows, columns) dimensions of the matrix."""
        return self._shape

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Entry]:
        bounds = zip(self._rowptr, self._rowptr[1:])
        for row, (start, stop) in enumerate(bounds):
            for column, value in zip(self._colind[start:stop], self._values[start:stop]):
                yield Index(row, column), value

    def __repr__(self) -> str:
        return f"CSRMatrix(shape={tuple(self._shape)}, nnz={len(self)})"

    def _in_bounds(self, key: Index) -> bool:
        return 0 <= key.first < self._shape.first and 0 <= key.second < self._shape.second

    def _check_bounds(self, key: Index) -> None:
        if not self._in_bounds(key):
            raise IndexError(
                f"index {tuple(key)} is outside a matrix of shape {tuple(self._shape)}"
            )

    def _position(self, key: Index) -> Optional[int]:
        if not self._in_bounds(key):
            return None
        start, stop = self._rowptr[key.first], self._rowptr[key.first + 1]
        pos = bisect_left(self._colind, key.second, start, stop)
        if pos < stop and self._colind[pos] == key.second:
            return pos
        return None

    def __contains__(self, key: Any) -> bool:
        try:
            key = _as_index(key)
        except (TypeError, ValueError):
            return False
        return self._position(key) is not None

    def __getitem__(self, key: Any) -> Any:
        key = _as_index(key)
        pos = self._position(key)
        if pos is None:
            raise KeyError(tuple(key))
        return self._values[pos]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert_or_assign(key, value)

    def find(self, key: Any) -> Optional[Entry]:
        """Return the stored ``(Index, value)`` entry at ``key``, or None."""
        key = _as_index(key)
        pos = self._position(key)
        if pos is None:
            return None
        return key, self._values[pos]

    def insert(self, entry: Tuple[Any, Any]) -> Tuple[Entry, bool]:
        """Insert ``(key, value)`` unless ``key`` is already stored.

        Returns the stored entry and whether an insertion took place.
        """
        raw_key, value = entry
        key = _as_index(raw_key)
        self._check_bounds(key)
        existing = self._position(key)
        if existing is not None:
            return (key, self._values[existing]), False

        start, stop = self._rowptr[key.first], self._rowptr[key.first + 1]
        pos = bisect_left(self._colind, key.second, start, stop)
        self._colind.insert(pos, key.second)
        self._values.insert(pos, value)
        tail = key.first + 1
        self._rowptr[tail:] = [ptr + 1 for ptr in self._rowptr[tail:]]
        return (key, value), True

    def insert_many(self, entries: Iterable[Tuple[Any, Any]]) -> None:
        """Insert many entries; keys already stored keep their current value."""
        additions: dict[Index, Any] = {}
        for raw_key, value in entries:
            key = _as_index(raw_key)
            self._check_bounds(key)
            if key not in additions and self._position(key) is None:
                additions[key] = value
        if not additions:
            return
        merged = sorted(itertools.chain(self, additions.items()), key=lambda e: e[0])
        self._assign_sorted(merged)

    def insert_or_assign(self, key: Any, value: Any) -> Tuple[Entry, bool]:
        """Store ``value`` at ``key``, replacing any stored value.

        Returns the stored entry and whether the key was newly inserted.
        """
        key = _as_index(key)
        self._check_bounds(key)
        pos = self._position(key)
        if pos is not None:
            self._values[pos] = value
            return (key, value), False
        return self.insert((key, value))

    def reshape(self, shape: Any) -> None:
        """Change the dimensions, dropping entries that fall outside them."""
        new_shape = _checked_shape(shape)
        old_entries = list(self)
        inside = [
            (key, value)
            for key, value in old_entries
            if key.first < new_shape.first and key.second < new_shape.second
        ]
        self._shape = new_shape
        if len(inside) == len(old_entries):
            last = self._rowptr[-1]
            rows = new_shape.first + 1
            self._rowptr = self._rowptr[:rows] + [last] * (rows - len(self._rowptr))
        else:
            self._assign_sorted(inside)

    def nbytes(self) -> int:
        """Storage size, counting 8 bytes per index and per value.

        Boolean values are counted as packed bits.
        """
        size = (len(self._rowptr) + len(self._colind)) * _INDEX_BYTES
        if all(isinstance(value, bool) for value in self._values):
            size += (len(self._values) + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE
        else:
            size += len(self._values) * _VALUE_BYTES
        return size

    def _assign_sorted(self, entries: list[Entry]) -> None:
        """Refill storage from entries sorted row-major and within bounds."""
        counts = [0] * (self._shape.first + 1)
        for key, _ in entries:
            counts[key.first + 1] += 1
        self._rowptr = list(itertools.accumulate(counts))
        self._colind = [key.second for key, _ in entries]
        self._values = [value for _, value in entries]