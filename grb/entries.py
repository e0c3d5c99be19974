"""Stored elements of matrices and vectors, by value and by reference."""

from __future__ import annotations

import operator
from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass
from typing import Any


def _matrix_key(index: Any) -> tuple[int, int]:
    i, j = index
    return (operator.index(i), operator.index(j))


@dataclass(frozen=True)
class MatrixEntry:
    """A matrix element: a ``(row, column)`` index and a value."""

    index: tuple[int, int]
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", _matrix_key(self.index))

    def __iter__(self) -> Iterator[Any]:
        yield self.index
        yield self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (MatrixEntry, MatrixRef)):
            return NotImplemented
        return self.index < other.index

    def to_pair(self) -> tuple[tuple[int, int], Any]:
        """Return the entry as a plain ``((i, j), value)`` tuple."""
        return (self.index, self.value)


class MatrixRef:
    """A matrix element whose value lives in a mutable sequence slot."""

    __slots__ = ("index", "_values", "_position")

    def __init__(self, index: Any, values: MutableSequence, position: int) -> None:
        self.index = _matrix_key(index)
        self._values = values
        self._position = position

    @property
    def value(self) -> Any:
        """The referenced value; assigning writes through to storage."""
        return self._values[self._position]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._values[self._position] = new_value

    def entry(self) -> MatrixEntry:
        """Return a detached copy of the referenced element."""
        return MatrixEntry(self.index, self.value)

    def __iter__(self) -> Iterator[Any]:
        yield self.index
        yield self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (MatrixEntry, MatrixRef)):
            return NotImplemented
        return self.index < other.index

    def __repr__(self) -> str:
        return f"MatrixRef(index={self.index!r}, value={self.value!r})"


@dataclass(frozen=True)
class VectorEntry:
    """A vector element: an integer index and a value."""

    index: int
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", operator.index(self.index))

    def __iter__(self) -> Iterator[Any]:
        yield self.index
        yield self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (VectorEntry, VectorRef)):
            return NotImplemented
        return self.index < other.index

    def to_pair(self) -> tuple[int, Any]:
        """Return the entry as a plain ``(index, value)`` tuple."""
        return (self.index, self.value)


class VectorRef:
    """A vector element whose value lives in a mutable sequence slot."""

    __slots__ = ("index", "_values", "_position")

    def __init__(self, index: int, values: MutableSequence, position: int) -> None:
        self.index = operator.index(index)
        self._values = values
        self._position = position

    @property
    def value(self) -> Any:
        """The referenced value; assigning writes through to storage."""
        return self._values[self._position]

    @value.setter
    def value(self, new_value: Any) -> None:
        self._values[self._position] = new_value

    def entry(self) -> VectorEntry:
        """Return a detached copy of the referenced element."""
        return VectorEntry(self.index, self.value)

    def __iter__(self) -> Iterator[Any]:
        yield self.index
        yield self.value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (VectorEntry, VectorRef)):
            return NotImplemented
        return self.index < other.index

    def __repr__(self) -> str:
        return f"VectorRef(index={self.index!r}, value={self.value!r})"


_ENTRY_TYPES = (MatrixEntry, MatrixRef, VectorEntry, VectorRef)


def get(index: int, entry: Any) -> Any:
    """Return part ``index`` of an entry: 0 is its index, 1 its value.

    Plain tuples and other sequences are indexed directly.
    """
    if isinstance(entry, _ENTRY_TYPES):
        if index == 0:
            return entry.index
        if index == 1:
            return entry.value
        raise IndexError(f"entry has no element {index}; only 0 and 1 exist")
    return entry[index]