# spgrb

Sparse linear algebra in the GraphBLAS style. The package provides sparse containers,
lazy views over them, and algorithms built on semirings. It is pure Python and has no
dependencies outside the standard library.

## Modules

- `spgrb.index`: `Index`, a frozen, hashable `(first, second)` pair. It is ordered
  row-major, unpacks as `i, j`, and `index[0]` / `index[1]` return the row and the column.
- `spgrb.csr_matrix`: `CSRMatrix`, a matrix stored in compressed sparse row form.
  - Iterating yields `(Index, value)` entries in row-major order.
  - It supports `len`, `in`, `m[i, j]` and `m[i, j] = v`.
  - Methods: `find`, `insert`, `insert_many`, `insert_or_assign`, `reshape` and `nbytes`.
    `insert` keeps an existing value. `insert_or_assign` replaces it.
  - Reading a key that is not stored raises `KeyError`. Writing outside the shape raises
    `IndexError`.
- `spgrb.vector`: `Vector`, a sparse vector with a fixed dimension.
  - Iterating yields `(index, value)` entries in increasing index order.
  - It has the same methods as `CSRMatrix`, and also `clear` and the class method
    `Vector.from_entries`.
- `spgrb.ops`: operators and semirings.
  - `BinaryOp` and `UnaryOp` are named operators. `BinaryOp.identity(kind)` returns the
    monoid identity where the operator has one.
  - Binary operators: `plus`, `minus`, `multiplies` (also `times`), `divides`, `maximum`,
    `minimum`, `modulus`, `logical_and`, `logical_or`, `logical_xor`, `logical_xnor`,
    `take_left` and `take_right`.
  - Unary operators: `negate` and `logical_not`.
  - `Semiring` and `make_semiring`, with ready-made semirings such as `plus_times`,
    `min_plus`, `max_plus`, `lor_land` and others.
  - The entry predicates `lower_triangle` and `upper_triangle`.
- `spgrb.full_matrix`: `FullMatrix`, a read-only matrix with the same value at every
  position, and the masks `full_matrix_mask` and `empty_matrix_mask`.
- `spgrb.complement`: `complement(container)`. It returns a `ComplementVectorView` or a
  `ComplementMatrixView`, which hold `True` wherever the container has no truthy value.
- `spgrb.submatrix`: `SubmatrixView(matrix, rows, columns)`. It shows the entries that
  fall inside half-open row and column ranges. The entries keep their original indices.
- `spgrb.transform`:
  - `transform(container, fn)` gives a view whose values are `fn((key, value))`.
  - `structure(container)` gives a view that holds `True` at every stored position.
- `spgrb.views`: `MatrixView` and `all_view`, plus the generators `indices` and `values`.
  On a `MatrixView`, reading `view[key]` first stores a `0` at that key if nothing is
  stored there yet.
- `spgrb.algorithms`:
  - `multiply(a, b, reduce=plus, combine=multiplies, mask=None)` works on
    matrix × matrix, matrix × vector, vector × matrix and vector × vector. The last case
    returns a scalar.
  - `reduce(a, op=plus, mask=None)` reduces each row of a matrix into a vector.
  - `permute(matrix, row_permutation, column_permutation=None)`.
- `spgrb.generate`: `generate_random_matrix` and `generate_random_vector`.
  - Float values are uniform in [0, 1). Integer values are 0 or 1.
  - The matrix generator is seeded with 0 by default. The vector generator uses system
    entropy unless it is given a seed.
  - A density outside [0, 1] raises `ValueError`.
- `spgrb.printing`: `format_matrix`, `format_vector`, `print_matrix` and `print_vector`.
  Each lists the shape, the entry count and every stored entry.
- `spgrb.kernels`:
  - `sumreduce` sums the stored values.
  - `spmm` accumulates a matrix times a dense row-major block, in place.
  - `median` and `mean`.
  - `benchmark_sumreduce` and `benchmark_spmm` time the kernels, print the median and the
    mean in milliseconds, and return a `BenchmarkResult`.

## Installation

```
pip install .
```

## Example

```python
from spgrb.csr_matrix import CSRMatrix
from spgrb.vector import Vector
from spgrb.algorithms import multiply
from spgrb.ops import minimum, plus
from spgrb.printing import print_matrix, print_vector

a = CSRMatrix((3, 3))
a[0, 1] = 2.0
a[2, 0] = 5.0

x = Vector(3)
x[1] = 4.0
x[0] = 1.0

y = multiply(a, x)                                  # plus-times by default
z = multiply(a, x, reduce=minimum, combine=plus)    # min-plus

print_matrix(a, "a")
print_vector(y, "a * x")
print_vector(z, "a min.+ x")
```

## Limitations

- The package does not read or write matrix files. Matrices are built in code or with the
  random generators.
- There is one matrix storage format, `CSRMatrix`, and one vector storage format,
  `Vector`.
- Everything runs on the CPU in plain Python.

## Running the tests

```
pip install .[test]
pytest
```