"""Views of matrices held in caller-owned compressed sparse row arrays."""

from __future__ import annotations

import operator
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any

from .entries import MatrixRef
from .exceptions import InvalidArgumentError, OutOfRangeError
from .spanner import Spanner


class CsrRowView:
    """One row of a CSR matrix: ``size`` values and their column indices."""

    __slots__ = ("_values", "_colind", "_row", "_size")

    def __init__(
        self, values: MutableSequence, colind: Sequence[int], row: int, size: int
    ) -> None:
        size = operator.index(size)
        if size < 0 or size > len(values) or size > len(colind):
            raise OutOfRangeError(f"row of size {size} exceeds the given arrays")
        self._values = values
        self._colind = colind
        self._row = operator.index(row)
        self._size = size

    @property
    def row(self) -> int:
        """Index of the row in the matrix."""
        return self._row

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, idx: int) -> Any:
        idx = operator.index(idx)
        if not 0 <= idx < self._size:
            raise OutOfRangeError(f"index {idx} out of range for row of {self._size}")
        return self._values[idx]

    def __iter__(self) -> Iterator[MatrixRef]:
        for k in range(self._size):
            yield MatrixRef((self._row, self._colind[k]), self._values, k)


class CsrMatrixView:
    """A matrix over existing ``values``, ``rowptr`` and ``colind`` arrays.

    Elements yielded refer to ``values``, so assigning to them writes into it.
    """

    __slots__ = ("_values", "_rowptr", "_colind", "_shape", "_nnz")

    def __init__(
        self,
        values: MutableSequence,
        rowptr: Sequence[int],
        colind: Sequence[int],
        shape: Any,
        nnz: int,
    ) -> None:
        m, n = shape
        m, n = operator.index(m), operator.index(n)
        nnz = operator.index(nnz)
        if m < 0 or n < 0:
            raise InvalidArgumentError(f"dimensions must be non-negative, got {m} x {n}")
        if len(rowptr) < m + 1:
            raise InvalidArgumentError(
                f"rowptr needs {m + 1} entries for {m} rows, got {len(rowptr)}"
            )
        if nnz < 0 or nnz > len(values) or nnz > len(colind):
            raise InvalidArgumentError(f"{nnz} nonzeros exceed the given arrays")
        self._values = values
        self._rowptr = rowptr
        self._colind = colind
        self._shape = (m, n)
        self._nnz = nnz

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(rows, columns)`` of the matrix."""
        return self._shape

    def __len__(self) -> int:
        return self._nnz

    def __iter__(self) -> Iterator[MatrixRef]:
        rowptr, colind, values = self._rowptr, self._colind, self._values
        for i in range(self._shape[0]):
            for p in range(rowptr[i], min(rowptr[i + 1], self._nnz)):
                yield MatrixRef((i, colind[p]), values, p)

    def find(self, key: Any) -> MatrixRef | None:
        """Return a reference to the element at ``key``, or ``None`` if absent."""
        i, j = key
        i, j = operator.index(i), operator.index(j)
        if not 0 <= i < self._shape[0]:
            return None
        for p in range(self._rowptr[i], self._rowptr[i + 1]):
            if self._colind[p] == j:
                return MatrixRef((i, j), self._values, p)
        return None

    def row(self, row_index: int) -> CsrRowView:
        """View of the stored elements of row ``row_index``."""
        row_index = operator.index(row_index)
        if not 0 <= row_index < self._shape[0]:
            raise OutOfRangeError(
                f"row {row_index} is outside a matrix of {self._shape[0]} rows"
            )
        begin, end = self._rowptr[row_index], self._rowptr[row_index + 1]
        return CsrRowView(
            Spanner(self._values, begin, end),
            Spanner(self._colind, begin, end),
            row_index,
            end - begin,
        )

    def rows(self) -> Iterator[CsrRowView]:
        """Views of every row, in order."""
        return (self.row(i) for i in range(self._shape[0]))