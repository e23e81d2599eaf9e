"""Lazy views that replace the stored values of a matrix or vector."""

from __future__ import annotations

import numbers
from typing import Any, Callable, Iterator, Optional, Tuple, Union

Entry = Tuple[Any, Any]
EntryFn = Callable[[Entry], Any]


def _transformed_entries(container: Any, fn: EntryFn) -> Iterator[Entry]:
    for key, value in container:
        yield key, fn((key, value))


def _transformed_find(container: Any, fn: EntryFn, key: Any) -> Optional[Entry]:
    entry = container.find(key)
    if entry is None:
        return None
    return entry[0], fn(entry)


class TransformMatrixView:
    """A matrix whose values are ``fn((Index, value))`` of another matrix.

    Keys are left unchanged; only the values seen through the view differ.
    """

    def __init__(self, matrix: Any, fn: EntryFn) -> None:
        self._container = matrix
        self._fn = fn

    @property
    def base(self) -> Any:
        """The matrix whose entries are transformed."""
        return self._container

    @property
    def shape(self) -> Any:
        return self._container.shape

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> Iterator[Entry]:
        return _transformed_entries(self._container, self._fn)

    def find(self, key: Any) -> Optional[Entry]:
        """Return the transformed entry at ``key``, or None if nothing is stored."""
        return _transformed_find(self._container, self._fn, key)

    def __repr__(self) -> str:
        return f"TransformMatrixView(shape={tuple(self.shape)}, nnz={len(self)})"


class TransformVectorView:
    """A vector whose values are ``fn((index, value))`` of another vector.

    Keys are left unchanged; only the values seen through the view differ.
    """

    def __init__(self, vector: Any, fn: EntryFn) -> None:
        self._container = vector
        self._fn = fn

    @property
    def base(self) -> Any:
        """The vector whose entries are transformed."""
        return self._container

    @property
    def shape(self) -> Any:
        return self._container.shape

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> Iterator[Entry]:
        return _transformed_entries(self._container, self._fn)

    def find(self, key: Any) -> Optional[Entry]:
        """Return the transformed entry at ``key``, or None if nothing is stored."""
        return _transformed_find(self._container, self._fn, key)

    def __repr__(self) -> str:
        return f"TransformVectorView(shape={self.shape}, nnz={len(self)})"


def transform(container: Any, fn: EntryFn) -> Union[TransformMatrixView, TransformVectorView]:
    """Return a transform view suited to a vector or a matrix."""
    if isinstance(container.shape, numbers.Integral):
        return TransformVectorView(container, fn)
    return TransformMatrixView(container, fn)


def structure(container: Any) -> Union[TransformMatrixView, TransformVectorView]:
    """A view holding ``True`` wherever ``container`` stores a value."""
    return transform(container, lambda _entry: True)