"""A mutable view over a matrix and helpers that project entries."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

Entry = Tuple[Any, Any]


class MatrixView:
    """A thin view forwarding to an underlying matrix.

    Reading a position with ``view[key]`` stores a zero there first when
    nothing is stored yet, then returns the stored value.
    """

    def __init__(self, matrix: Any) -> None:
        if isinstance(matrix, MatrixView):
            matrix = matrix.base
        self._matrix = matrix

    @property
    def base(self) -> Any:
        """The matrix the view forwards to."""
        return self._matrix

    @property
    def shape(self) -> Any:
        return self._matrix.shape

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._matrix)

    def __getitem__(self, key: Any) -> Any:
        (_, value), _inserted = self.insert((key, 0))
        return value

    def __repr__(self) -> str:
        return f"MatrixView({self._matrix!r})"

    def find(self, key: Any) -> Optional[Entry]:
        """Return the stored entry at ``key``, or None."""
        return self._matrix.find(key)

    def insert(self, entry: Entry) -> Tuple[Entry, bool]:
        """Insert ``entry`` unless its key is stored; see the matrix's ``insert``."""
        return self._matrix.insert(entry)

    def insert_or_assign(self, key: Any, value: Any) -> Tuple[Entry, bool]:
        """Store ``value`` at ``key``, replacing any stored value."""
        return self._matrix.insert_or_assign(key, value)


def all_view(matrix: Any) -> MatrixView:
    """Wrap ``matrix`` in a :class:`MatrixView`; views are not wrapped twice."""
    if isinstance(matrix, MatrixView):
        return matrix
    return MatrixView(matrix)


def indices(container: Any) -> Iterator[Any]:
    """Yield the key of every stored entry."""
    for key, _value in container:
        yield key


def values(container: Any) -> Iterator[Any]:
    """Yield the value of every stored entry."""
    for _key, value in container:
        yield value