"""The general-purpose sparse matrix container."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from typing import Any, Union

from .csr import CsrMatrix
from .entries import MatrixRef
from .matrix_io import mmread

PathLike = Union[str, "os.PathLike[str]"]


class Matrix:
    """A sparse matrix of ``shape[0]`` x ``shape[1]`` elements in CSR storage.

    Indexing an element that is not stored inserts it with the default scalar
    (``0``, or ``scalar_type()`` for matrices read from a file).
    """

    __slots__ = ("_backend", "_default")

    def __init__(self, shape: Any = (0, 0)) -> None:
        self._backend = CsrMatrix(shape)
        self._default: Any = 0

    @classmethod
    def from_file(cls, path: PathLike, scalar_type: type = float) -> Matrix:
        """Build a matrix from the Matrix Market file at ``path``."""
        result = mmread(path, scalar_type)
        matrix = cls(result.shape)
        matrix._default = scalar_type()
        matrix.insert_many(result.entries)
        return matrix

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(rows, columns)`` of the matrix."""
        return self._backend.shape

    def __len__(self) -> int:
        return len(self._backend)

    def empty(self) -> bool:
        """Whether the matrix stores no elements."""
        return len(self) == 0

    def __iter__(self) -> Iterator[MatrixRef]:
        return iter(self._backend)

    def __repr__(self) -> str:
        items = ", ".join(f"{ref.index}: {ref.value!r}" for ref in self)
        return f"Matrix(shape={self.shape}, {{{items}}})"

    def insert(self, entry: Any) -> tuple[MatrixRef, bool]:
        """Insert a ``((i, j), value)`` entry unless its index is already stored.

        Returns a reference to the element at that index and whether the
        insertion took place.
        """
        return self._backend.insert(entry)

    def insert_many(self, entries: Iterable[Any]) -> None:
        """Insert every entry whose index is not yet stored."""
        self._backend.insert_many(entries)

    def clear(self) -> None:
        """Remove every stored element, keeping the shape."""
        self._backend = CsrMatrix(self.shape)

    def insert_or_assign(self, key: Any, value: Any) -> tuple[MatrixRef, bool]:
        """Store ``value`` at ``key``; return the reference and whether it is new."""
        return self._backend.insert_or_assign(key, value)

    def find(self, key: Any) -> MatrixRef | None:
        """Return a reference to the element at ``key``, or ``None`` if absent."""
        return self._backend.find(key)

    def reshape(self, shape: Any) -> None:
        """Change the dimensions, discarding elements outside the new shape."""
        self._backend.reshape(shape)

    def __getitem__(self, index: Any) -> Any:
        ref, _ = self._backend.insert((index, self._default))
        return ref.value

    def __setitem__(self, index: Any, value: Any) -> None:
        self._backend.insert_or_assign(index, value)