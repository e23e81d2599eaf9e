"""Random sparse matrices and vectors."""

from __future__ import annotations

import random
from typing import Any, Optional

from .csr_matrix import CSRMatrix
from .index import Index
from .vector import Vector


def _check_density(density: float) -> None:
    if density > 1.0 or density < 0:
        raise ValueError("generate_random: invalid density argument.")


def _draw_value(rng: random.Random, kind: type) -> Any:
    if issubclass(kind, float):
        return kind(rng.random())
    return kind(rng.randint(0, 1))


def generate_random_matrix(shape: Any, density: float = 0.01, seed: Optional[int] = 0,
                           kind: type = float) -> CSRMatrix:
    """A matrix with ``int(density * rows * cols)`` distinct random entries.

    Floating values are uniform in [0, 1); integer values are 0 or 1.
    The same seed always gives the same matrix.
    """
    _check_density(density)
    rows, cols = shape
    nnz = int(density * rows * cols)
    rng = random.Random(seed)

    tuples: dict[Index, Any] = {}
    while len(tuples) < nnz:
        key = Index(rng.randint(0, rows - 1), rng.randint(0, cols - 1))
        if key not in tuples:
            tuples[key] = _draw_value(rng, kind)

    matrix = CSRMatrix(Index(rows, cols))
    matrix.insert_many(sorted(tuples.items()))
    return matrix


def generate_random_vector(shape: int, density: float = 0.01, seed: Optional[int] = None,
                           kind: type = float) -> Vector:
    """A vector with ``int(density * shape)`` distinct random entries.

    Without a seed the generator is seeded from system entropy.
    """
    _check_density(density)
    nnz = int(density * shape)
    rng = random.Random(seed)

    tuples: dict[int, Any] = {}
    while len(tuples) < nnz:
        index = rng.randint(0, shape - 1)
        if index not in tuples:
            tuples[index] = _draw_value(rng, kind)

    vector = Vector(shape)
    vector.insert_many(sorted(tuples.items()))
    return vector