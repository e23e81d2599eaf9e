"""A view of the entries of a matrix that fall in a row and column range."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from .index import Index

Entry = Tuple[Index, Any]


def _as_range(bounds: Any, name: str) -> Index:
    if not isinstance(bounds, Index):
        start, stop = bounds
        bounds = Index(start, stop)
    if bounds.second < bounds.first:
        raise ValueError(f"{name} range ends before it starts: {tuple(bounds)}")
    return bounds


def _as_index(key: Any) -> Index:
    if isinstance(key, Index):
        return key
    first, second = key
    return Index(first, second)


class SubmatrixView:
    """Entries of ``matrix`` with row in ``rows`` and column in ``columns``.

    Both ranges are half-open ``(start, stop)`` pairs. Entries keep the
    indices they have in the underlying matrix.
    """

    def __init__(self, matrix: Any, rows: Any, columns: Any) -> None:
        self._matrix = matrix
        self._rows = _as_range(rows, "row")
        self._columns = _as_range(columns, "column")

    @property
    def shape(self) -> Index:
        return Index(
            self._rows.second - self._rows.first,
            self._columns.second - self._columns.first,
        )

    def _inside(self, key: Index) -> bool:
        return (
            self._rows.first <= key.first < self._rows.second
            and self._columns.first <= key.second < self._columns.second
        )

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Entry]:
        for key, value in self._matrix:
            if self._inside(_as_index(key)):
                yield key, value

    def find(self, key: Any) -> Optional[Entry]:
        """Return the stored entry at ``key`` if it lies inside the view."""
        key = _as_index(key)
        if not self._inside(key):
            return None
        return self._matrix.find(key)