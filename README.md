# grb

Sparse matrices and vectors, with lazy views and GraphBLAS-style algorithms,
written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

- `grb.matrix.Matrix`: the general sparse matrix, stored in compressed
  sparse row form (`grb.csr.CsrMatrix`). Reading `m[i, j]` at an index that
  holds no value inserts the default scalar there and returns it.
- `grb.dia.DiaMatrix`: a matrix that stores its values by diagonal.
- `grb.dense_vector.DenseVector`: a vector that records which of its
  positions hold a value.
- `grb.full_vector.FullVector`: a read-only vector with the same value at
  every index. `FullVectorMask` and `EmptyVectorMask` are all-true and
  all-false masks of this kind.

`shape` is a property. Iterating over a matrix yields references whose
`index` is a `(row, column)` tuple and whose `value` can be assigned to write
back into the container. Each reference unpacks as `(index, value)`.

```python
from grb.matrix import Matrix

m = Matrix((10, 10))
m[2, 3] = 12
m[7, 1] = 12
print(m.shape, len(m))

for (i, j), value in m:
    print(i, j, value)

ref = m.find((2, 3))
ref.value = 5
```

Both `insert` and `insert_or_assign` return a reference together with a
flag that says whether a new element was stored.

## Reading Matrix Market files

`Matrix.from_file(path, float)` and `grb.matrix_io.mmread(path, float)` read
coordinate Matrix Market files, in both general and symmetric form. For a
symmetric file, each off-diagonal element is stored at both `(i, j)` and
`(j, i)`. `grb.matrix_io.MMReadMatrix` reads the entries lazily, in the order
they appear in the file. A malformed or unsupported file raises `ValueError`.

## Views

`grb.views` provides lazy views. They do not copy data.

- `transpose(matrix)` swaps rows and columns.
- `filter_view(container, fn)` keeps the entries for which `fn(entry)` is true.
- `mask(matrix, mask_matrix)` keeps the entries where the mask stores a true
  value.

`grb.csr_view.CsrMatrixView` wraps existing `values`, `rowptr` and `colind`
sequences as a matrix. Its `row(i)` and `rows()` methods give views of single
rows. `grb.spanner.Spanner` is a writable window onto part of a sequence.

## Algorithms

`grb.algorithms` provides:

- `assign(target, source)`, where `source` is a container of the same shape
  or a scalar
- `ewise_intersection` and `ewise_union`, each with an optional mask
- `multiply`, `multiply_flops`, and `mxv` with a `Semiring`, an accumulator,
  `alpha` and `merge`. `mxv` returns a new vector and leaves `c` unchanged.
- `reduce`, which reduces each row into a vector, and `sum_values`

`grb.monoid` provides `plus`, `identity`, `is_binary_op` and `is_monoid`.

```python
from grb.matrix import Matrix
from grb.algorithms import multiply, ewise_union
from grb.monoid import plus

a = Matrix((2, 2))
a[0, 0] = 1
a[1, 1] = 2
c = multiply(a, a)
d = ewise_union(a, c, plus)
```

Errors are raised as `grb.exceptions.GrbError` or one of its subclasses.
`InvalidArgumentError` is also a `ValueError`, and `OutOfRangeError` is also
an `IndexError`.

## What it does not do

- There is no command-line program.
- The package does not write Matrix Market or any other file format.
- It has no random matrix generation and no pretty-printing helper.
- There is no dense matrix backend.
- Nothing runs on a GPU or in parallel. All work is done in plain Python on
  the calling thread.