"""Compressed sparse row (CSR) storage for sparse matrices."""

from __future__ import annotations

import bisect
import itertools
import operator
from array import array
from collections.abc import Iterable, Iterator
from typing import Any

from .entries import MatrixRef
from .exceptions import InvalidArgumentError, OutOfRangeError

_INDEX_BYTES = array("Q").itemsize
_SCALAR_BYTES = 8
_BITS_PER_BYTE = 8


def _as_shape(shape: Any) -> tuple[int, int]:
    m, n = shape
    m, n = operator.index(m), operator.index(n)
    if m < 0 or n < 0:
        raise InvalidArgumentError(f"matrix dimensions must be non-negative, got {m} x {n}")
    return m, n


def _as_key(key: Any) -> tuple[int, int]:
    i, j = key
    return operator.index(i), operator.index(j)


def _split_entry(entry: Any) -> tuple[tuple[int, int], Any]:
    index, value = entry
    return _as_key(index), value


class CsrMatrix:
    """A sparse matrix whose stored elements are kept sorted by row, then column."""

    __slots__ = ("_m", "_n", "_rowptr", "_colind", "_values")

    def __init__(self, shape: Any = (0, 0)) -> None:
        self._m, self._n = _as_shape(shape)
        self._rowptr: list[int] = [0] * (self._m + 1)
        self._colind: list[int] = []
        self._values: list[Any] = []

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(rows, columns)`` of the matrix."""
        return (self._m, self._n)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[MatrixRef]:
        rowptr, colind, values = self._rowptr, self._colind, self._values
        for i in range(self._m):
            for p in range(rowptr[i], rowptr[i + 1]):
                yield MatrixRef((i, colind[p]), values, p)

    def __repr__(self) -> str:
        items = ", ".join(f"{ref.index}: {ref.value!r}" for ref in self)
        return f"CsrMatrix(shape={self.shape}, {{{items}}})"

    def _in_bounds(self, key: tuple[int, int]) -> bool:
        i, j = key
        return 0 <= i < self._m and 0 <= j < self._n

    def _check_bounds(self, key: tuple[int, int]) -> None:
        if not self._in_bounds(key):
            raise OutOfRangeError(
                f"index {key} is outside a {self._m} x {self._n} matrix"
            )

    def _position(self, key: tuple[int, int]) -> int | None:
        if not self._in_bounds(key):
            return None
        i, j = key
        lo, hi = self._rowptr[i], self._rowptr[i + 1]
        p = bisect.bisect_left(self._colind, j, lo, hi)
        if p < hi and self._colind[p] == j:
            return p
        return None

    def _assign(self, items: list[tuple[tuple[int, int], Any]]) -> None:
        """Refill storage from ``items``, already sorted and within bounds."""
        counts = [0] * (self._m + 1)
        for (i, _), _ in items:
            counts[i + 1] += 1
        self._rowptr = list(itertools.accumulate(counts))
        self._colind = [j for (_, j), _ in items]
        self._values = [value for _, value in items]

    def find(self, key: Any) -> MatrixRef | None:
        """Return a reference to the element at ``key``, or ``None`` if absent."""
        key = _as_key(key)
        p = self._position(key)
        if p is None:
            return None
        return MatrixRef(key, self._values, p)

    def insert_many(self, entries: Iterable[Any]) -> None:
        """Insert every ``((i, j), value)`` entry whose index is not yet stored.

        Elements already present keep their values; among new entries that
        share an index, the first one wins.
        """
        new: dict[tuple[int, int], Any] = {}
        for entry in entries:
            key, value = _split_entry(entry)
            self._check_bounds(key)
            new.setdefault(key, value)
        merged = {ref.index: ref.value for ref in self}
        for key, value in new.items():
            merged.setdefault(key, value)
        self._assign(sorted(merged.items(), key=operator.itemgetter(0)))

    def insert(self, entry: Any) -> tuple[MatrixRef, bool]:
        """Insert one entry unless its index is already stored.

        Returns a reference to the element at that index and whether the
        insertion took place.
        """
        key, value = _split_entry(entry)
        self._check_bounds(key)
        p = self._position(key)
        if p is not None:
            return MatrixRef(key, self._values, p), False
        self.insert_many([(key, value)])
        return MatrixRef(key, self._values, self._position(key)), True

    def insert_or_assign(self, key: Any, value: Any) -> tuple[MatrixRef, bool]:
        """Store ``value`` at ``key``, replacing any existing value.

        Returns a reference to the element and whether it was newly inserted.
        """
        key = _as_key(key)
        self._check_bounds(key)
        p = self._position(key)
        if p is not None:
            self._values[p] = value
            return MatrixRef(key, self._values, p), False
        return self.insert((key, value))

    def reshape(self, shape: Any) -> None:
        """Change the dimensions, discarding elements that fall outside."""
        m, n = _as_shape(shape)
        kept = [
            (ref.index, ref.value)
            for ref in self
            if ref.index[0] < m and ref.index[1] < n
        ]
        self._m, self._n = m, n
        self._assign(kept)

    def nbytes(self) -> int:
        """Estimated storage size in bytes.

        Indices count as 64-bit integers and values as 8-byte scalars;
        boolean values are counted one bit each.
        """
        size = (len(self._rowptr) + len(self._colind)) * _INDEX_BYTES
        if self._values and all(isinstance(v, bool) for v in self._values):
            size += (len(self._values) + _BITS_PER_BYTE - 1) // _BITS_PER_BYTE
        else:
            size += len(self._values) * _SCALAR_BYTES
        return size