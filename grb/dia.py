"""Diagonal (DIA) storage for sparse matrices."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any

from .entries import MatrixRef
from .exceptions import InvalidArgumentError, OutOfRangeError

_SCALAR_BYTES = 8
_BITS_PER_BYTE = 8


def _as_key(key: Any) -> tuple[int, int]:
    i, j = key
    return operator.index(i), operator.index(j)


def _bit_bytes(count: int) -> int:
    return (count + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE


class DiaMatrix:
    """A sparse matrix stored as one value array per occupied diagonal.

    Diagonal ``j - i + rows - 1`` holds element ``(i, j)`` at position
    ``min(i, j)``.  Iteration walks diagonals in ascending order, and each
    diagonal from its top-left end.
    """

    __slots__ = ("_m", "_n", "_nnz", "_diagonals")

    def __init__(self, shape: Any = (0, 0)) -> None:
        m, n = shape
        m, n = operator.index(m), operator.index(n)
        if m < 0 or n < 0:
            raise InvalidArgumentError(
                f"matrix dimensions must be non-negative, got {m} x {n}"
            )
        self._m, self._n = m, n
        self._nnz = 0
        self._diagonals: dict[int, tuple[list[Any], list[bool]]] = {}

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(rows, columns)`` of the matrix."""
        return (self._m, self._n)

    def __len__(self) -> int:
        return self._nnz

    def __repr__(self) -> str:
        items = ", ".join(f"{ref.index}: {ref.value!r}" for ref in self)
        return f"DiaMatrix(shape={self.shape}, {{{items}}})"

    def __iter__(self) -> Iterator[MatrixRef]:
        for diagonal in sorted(self._diagonals):
            values, flags = self._diagonals[diagonal]
            offset = diagonal - (self._m - 1)
            for idx, flag in enumerate(flags):
                if not flag:
                    continue
                if offset >= 0:
                    index = (idx, idx + offset)
                else:
                    index = (idx - offset, idx)
                yield MatrixRef(index, values, idx)

    def _slot(self, key: Any) -> tuple[tuple[int, int], list[Any], list[bool], int]:
        i, j = _as_key(key)
        if not (0 <= i < self._m and 0 <= j < self._n):
            raise OutOfRangeError(
                f"index {(i, j)} is outside a {self._m} x {self._n} matrix"
            )
        diagonal = j - i + self._m - 1
        idx = min(i, j)
        if diagonal not in self._diagonals:
            count = min(self._m - i, self._n - j) + idx
            self._diagonals[diagonal] = ([None] * count, [False] * count)
        values, flags = self._diagonals[diagonal]
        return (i, j), values, flags, idx

    def insert(self, entry: Any) -> tuple[MatrixRef, bool]:
        """Insert a ``((i, j), value)`` entry unless its index is already stored.

        Returns a reference to the element and whether the insertion took place.
        """
        key, value = entry
        index, values, flags, idx = self._slot(key)
        if flags[idx]:
            return MatrixRef(index, values, idx), False
        values[idx] = value
        flags[idx] = True
        self._nnz += 1
        return MatrixRef(index, values, idx), True

    def insert_many(self, entries: Iterable[Any]) -> None:
        """Insert every entry whose index is not yet stored."""
        for entry in entries:
            self.insert(entry)

    def insert_or_assign(self, key: Any, value: Any) -> tuple[MatrixRef, bool]:
        """Store ``value`` at ``key``; return the reference and whether it is new."""
        index, values, flags, idx = self._slot(key)
        values[idx] = value
        inserted = not flags[idx]
        if inserted:
            flags[idx] = True
            self._nnz += 1
        return MatrixRef(index, values, idx), inserted

    def nbytes(self) -> int:
        """Estimated storage size in bytes.

        Values count as 8-byte scalars, or one bit each when every stored
        value is boolean; presence flags count one bit each.
        """
        stored = [ref.value for ref in self]
        boolean = bool(stored) and all(isinstance(v, bool) for v in stored)
        size = 0
        for values, flags in self._diagonals.values():
            if boolean:
                size += _bit_bytes(len(values))
            else:
                size += len(values) * _SCALAR_BYTES
            size += _bit_bytes(len(flags))
        return size