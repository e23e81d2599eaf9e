"""Sparse matrices, vectors, lazy views and semiring algorithms in the GraphBLAS style."""

__version__ = "0.1.0"