"""Simple sparse kernels and a small timing harness around them."""

from __future__ import annotations

import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, MutableSequence, Sequence

N_VECS = 32


@dataclass
class BenchmarkResult:
    """Timings in seconds and the value each trial produced."""

    durations: list[float] = field(default_factory=list)
    results: list[Any] = field(default_factory=list)

    @property
    def median(self) -> float:
        return median(self.durations)

    @property
    def mean(self) -> float:
        return mean(self.durations)


def sumreduce(matrix: Iterable[Any]) -> Any:
    """Sum of the stored values of a matrix."""
    total = 0
    for _key, value in matrix:
        total += value
    return total


def spmm(a: Any, b: Sequence[Any], c: MutableSequence[Any], n_vecs: int) -> MutableSequence[Any]:
    """Accumulate ``a @ b`` into ``c`` in place and return ``c``.

    ``b`` and ``c`` are row-major dense blocks with ``n_vecs`` columns.
    """
    for (i, k), v in a:
        b_row, c_row = k * n_vecs, i * n_vecs
        for j in range(n_vecs):
            c[c_row + j] += v * b[b_row + j]
    return c


def median(values: Iterable[float]) -> float:
    """Median of the values; the mean of the middle two for an even count."""
    data = list(values)
    if not data:
        raise ValueError("median of no values")
    return statistics.median(data)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    data = list(values)
    if not data:
        raise ValueError("mean of no values")
    return sum(data) / len(data)


def _run_trials(kernel: Callable[[], Any], n_trials: int) -> BenchmarkResult:
    if n_trials < 1:
        raise ValueError("at least one trial is needed")
    result = BenchmarkResult()
    print("Beginning trials...")
    for _ in range(n_trials):
        begin = time.perf_counter()
        value = kernel()
        result.durations.append(time.perf_counter() - begin)
        result.results.append(value)
    print(f"Median is {result.median * 1000:f}ms")
    print(f"Mean is {result.mean * 1000:f}ms")
    return result


def benchmark_sumreduce(matrix: Any, n_trials: int = 10) -> BenchmarkResult:
    """Time :func:`sumreduce` over ``n_trials`` runs and print median and mean."""
    return _run_trials(lambda: sumreduce(matrix), n_trials)


def benchmark_spmm(matrix: Any, n_trials: int = 10) -> BenchmarkResult:
    """Time :func:`spmm` against a block of ones with 32 columns.

    The output block is not cleared between trials, so each trial's recorded
    sum includes the previous ones.
    """
    rows, cols = matrix.shape
    b = [1.0] * (cols * N_VECS)
    c = [0.0] * (rows * N_VECS)

    def kernel() -> float:
        spmm(matrix, b, c, N_VECS)
        return sum(c)

    return _run_trials(kernel, n_trials)