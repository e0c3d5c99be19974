"""Lazy views over matrices and vectors: filtering, masking and transposition."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

from .entries import MatrixEntry, get


class FilterView:
    """The elements of a matrix or vector for which ``fn(entry)`` is true.

    The view is lazy: it reflects later changes to the underlying container,
    and elements it yields refer to the container's own storage.
    """

    __slots__ = ("_container", "_fn")

    def __init__(self, container: Any, fn: Callable[[Any], Any]) -> None:
        self._container = container
        self._fn = fn

    @property
    def shape(self) -> Any:
        """Dimensions of the underlying container."""
        return self._container.shape

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        fn = self._fn
        return (entry for entry in self._container if fn(entry))

    def find(self, key: Any) -> Any:
        """Return the element at ``key`` if stored and selected, else ``None``."""
        entry = self._container.find(key)
        if entry is None or not self._fn(entry):
            return None
        return entry

    def base(self) -> Any:
        """The container being filtered."""
        return self._container

    def __repr__(self) -> str:
        return f"FilterView({self._container!r})"


class MaskedView:
    """The elements of a matrix whose index holds a true value in a mask matrix."""

    __slots__ = ("_mask", "_filtered")

    def __init__(self, matrix: Any, mask: Any) -> None:
        self._mask = mask
        self._filtered = FilterView(matrix, self._selected)

    def _selected(self, entry: Any) -> bool:
        hit = self._mask.find(get(0, entry))
        return hit is not None and bool(get(1, hit))

    @property
    def shape(self) -> Any:
        """Dimensions of the underlying matrix."""
        return self._filtered.shape

    def __len__(self) -> int:
        return len(self._filtered)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._filtered)

    def find(self, key: Any) -> Any:
        """Return the element at ``key`` if stored and unmasked, else ``None``."""
        return self._filtered.find(key)

    def __repr__(self) -> str:
        return f"MaskedView({self._filtered.base()!r})"


class TransposeView:
    """A read-only transposed view of a matrix."""

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(columns, rows)`` of the underlying matrix."""
        m, n = self._matrix.shape
        return (n, m)

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[MatrixEntry]:
        for entry in self._matrix:
            i, j = get(0, entry)
            yield MatrixEntry((j, i), get(1, entry))

    def find(self, key: Any) -> MatrixEntry | None:
        """Return the element at ``key`` of the transpose, or ``None``."""
        i, j = key
        i, j = operator.index(i), operator.index(j)
        hit = self._matrix.find((j, i))
        if hit is None:
            return None
        return MatrixEntry((i, j), get(1, hit))

    def __repr__(self) -> str:
        return f"TransposeView({self._matrix!r})"


def filter_view(container: Any, fn: Callable[[Any], Any]) -> FilterView:
    """View of the elements of ``container`` selected by ``fn``."""
    return FilterView(container, fn)


def mask(matrix: Any, mask_matrix: Any) -> MaskedView:
    """View of the elements of ``matrix`` selected by ``mask_matrix``."""
    return MaskedView(matrix, mask_matrix)


def transpose(matrix: Any) -> TransposeView:
    """Transposed view of ``matrix``."""
    return TransposeView(matrix)