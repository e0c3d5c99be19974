"""Vectors in which every index holds the same value, and masks built on them."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any

from .entries import VectorEntry
from .exceptions import InvalidArgumentError, OutOfRangeError


class FullVector:
    """A read-only vector of dimension ``shape`` storing ``value`` at every index."""

    __slots__ = ("_shape", "_value")

    def __init__(self, shape: int = sys.maxsize, value: Any = 0) -> None:
        shape = operator.index(shape)
        if shape < 0:
            raise InvalidArgumentError(
                f"vector dimension must be non-negative, got {shape}"
            )
        self._shape = shape
        self._value = value

    @property
    def shape(self) -> int:
        """Dimension of the vector."""
        return self._shape

    def __len__(self) -> int:
        return self._shape

    def __iter__(self) -> Iterator[VectorEntry]:
        value = self._value
        for index in range(self._shape):
            yield VectorEntry(index, value)

    def __getitem__(self, index: Any) -> Any:
        index = operator.index(index)
        if not 0 <= index < self._shape:
            raise OutOfRangeError(
                f"index {index} is outside a vector of dimension {self._shape}"
            )
        return self._value

    def find(self, key: Any) -> VectorEntry | None:
        """Return the element at ``key``, or ``None`` if it lies outside."""
        key = operator.index(key)
        if 0 <= key < self._shape:
            return VectorEntry(key, self._value)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self._shape}, value={self._value!r})"


class FullVectorMask(FullVector):
    """A mask that selects every index."""

    __slots__ = ()

    def __init__(self, shape: int = sys.maxsize) -> None:
        super().__init__(shape, True)


class EmptyVectorMask(FullVector):
    """A mask that selects no index."""

    __slots__ = ()

    def __init__(self, shape: int = sys.maxsize) -> None:
        super().__init__(shape, False)