"""Dense storage for sparse vectors: a value slot and a flag per index."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any

from .entries import VectorRef
from .exceptions import InvalidArgumentError, OutOfRangeError

_DEFAULT = 0


def _as_length(shape: Any) -> int:
    n = operator.index(shape)
    if n < 0:
        raise InvalidArgumentError(f"vector dimension must be non-negative, got {n}")
    return n


class DenseVector:
    """A vector of ``shape`` slots, of which only flagged ones hold elements."""

    __slots__ = ("_data", "_flags", "_nnz")

    def __init__(self, shape: Any = 0) -> None:
        n = _as_length(shape)
        self._data: list[Any] = [_DEFAULT] * n
        self._flags: list[bool] = [False] * n
        self._nnz = 0

    @property
    def shape(self) -> int:
        """Dimension of the vector."""
        return len(self._data)

    def __len__(self) -> int:
        return self._nnz

    def __repr__(self) -> str:
        items = ", ".join(f"{ref.index}: {ref.value!r}" for ref in self)
        return f"DenseVector(shape={self.shape}, {{{items}}})"

    def _check(self, index: Any) -> int:
        index = operator.index(index)
        if not 0 <= index < self.shape:
            raise OutOfRangeError(
                f"index {index} is outside a vector of dimension {self.shape}"
            )
        return index

    def __getitem__(self, index: Any) -> Any:
        index = self._check(index)
        if not self._flags[index]:
            self._data[index] = _DEFAULT
            self._flags[index] = True
            self._nnz += 1
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.insert_or_assign(index, value)

    def __iter__(self) -> Iterator[VectorRef]:
        for index, flag in enumerate(self._flags):
            if flag:
                yield VectorRef(index, self._data, index)

    def insert(self, entry: Any) -> tuple[VectorRef, bool]:
        """Insert an ``(index, value)`` entry unless the index is already stored.

        Returns a reference to the element and whether the insertion took place.
        """
        index, value = entry
        index = self._check(index)
        if self._flags[index]:
            return VectorRef(index, self._data, index), False
        self._nnz += 1
        self._flags[index] = True
        self._data[index] = value
        return VectorRef(index, self._data, index), True

    def insert_many(self, entries: Iterable[Any]) -> None:
        """Insert every entry whose index is not yet stored."""
        for entry in entries:
            self.insert(entry)

    def insert_or_assign(self, key: Any, value: Any) -> tuple[VectorRef, bool]:
        """Store ``value`` at ``key``; return the reference and whether it is new."""
        key = self._check(key)
        inserted = not self._flags[key]
        if inserted:
            self._nnz += 1
            self._flags[key] = True
        self._data[key] = value
        return VectorRef(key, self._data, key), inserted

    def find(self, key: Any) -> VectorRef | None:
        """Return a reference to the element at ``key``, or ``None`` if absent."""
        key = operator.index(key)
        if 0 <= key < self.shape and self._flags[key]:
            return VectorRef(key, self._data, key)
        return None

    def reshape(self, shape: Any) -> None:
        """Change the dimension, discarding elements beyond the new end."""
        n = _as_length(shape)
        if n < self.shape:
            del self._data[n:]
            del self._flags[n:]
            self._nnz = sum(self._flags)
        else:
            grow = n - self.shape
            self._data.extend([_DEFAULT] * grow)
            self._flags.extend([False] * grow)

    def clear(self) -> None:
        """Remove every stored element, keeping the dimension."""
        n = self.shape
        self._data = [_DEFAULT] * n
        self._flags = [False] * n
        self._nnz = 0