"""Two-dimensional index used as the key of matrix entries."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, order=True)
class Index:
    """A (row, column) pair of integers.

    Instances are immutable and hashable, so they work as dictionary keys.
    Ordering is row-major: first by row, then by column.
    """

    first: int
    second: int

    def __post_init__(self) -> None:
        for name in ("first", "second"):
            raw = getattr(self, name)
            try:
                value = operator.index(raw)
            except TypeError:
                raise TypeError(
                    f"Index.{name} must be an integer, got {type(raw).__name__}"
                ) from None
            object.__setattr__(self, name, value)

    def __getitem__(self, dim: int) -> int:
        """Return the row for dimension 0 and the column for dimension 1."""
        if dim == 0:
            return self.first
        if dim == 1:
            return self.second
        raise IndexError(f"Index has two dimensions, got dimension {dim!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.first
        yield self.second