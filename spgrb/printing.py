"""Text listings of matrices and vectors."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _header(text: str, label: str) -> str:
    if label:
        return f'{text} "{label}"'
    return text


def format_matrix(matrix: Any, label: str = "") -> str:
    """List the shape, entry count and every stored entry of a matrix."""
    rows, cols = matrix.shape
    lines = [_header(f"{rows} x {cols} matrix with {len(matrix)} stored values", label)]
    lines.extend(f"({i}, {j}): {_format_value(value)}" for (i, j), value in matrix)
    return "\n".join(lines) + "\n"


def format_vector(vector: Any, label: str = "") -> str:
    """List the dimension, entry count and every stored entry of a vector."""
    lines = [
        _header(f"{vector.shape} dimension vector with {len(vector)} stored values", label)
    ]
    lines.extend(f"({i}): {_format_value(value)}" for i, value in vector)
    return "\n".join(lines) + "\n"


def print_matrix(matrix: Any, label: str = "", file: Optional[TextIO] = None) -> None:
    """Write :func:`format_matrix` output to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_matrix(matrix, label))


def print_vector(vector: Any, label: str = "", file: Optional[TextIO] = None) -> None:
    """Write :func:`format_vector` output to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_vector(vector, label))