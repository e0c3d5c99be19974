"""A bounded, writable window onto a contiguous slice of a sequence."""

from __future__ import annotations

import itertools
import operator
from collections.abc import Iterator, MutableSequence
from typing import Any

from .exceptions import OutOfRangeError


class Spanner:
    """View of ``seq[start:stop]`` that reads and writes the underlying sequence."""

    __slots__ = ("_seq", "_start", "_stop")

    def __init__(
        self, seq: MutableSequence, start: int = 0, stop: int | None = None
    ) -> None:
        length = len(seq)
        stop = length if stop is None else operator.index(stop)
        start = operator.index(start)
        if not 0 <= start <= stop <= length:
            raise OutOfRangeError(
                f"span [{start}, {stop}) does not fit a sequence of length {length}"
            )
        self._seq = seq
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self):
            raise OutOfRangeError(
                f"index {index} out of range for span of length {len(self)}"
            )
        return self._start + index

    def __getitem__(self, index: int) -> Any:
        return self._seq[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._seq[self._position(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return itertools.islice(self._seq, self._start, self._stop)

    def __repr__(self) -> str:
        return f"Spanner({list(self)!r})"

    def empty(self) -> bool:
        """Whether the span holds no elements."""
        return len(self) == 0

    def first(self, n: int) -> Spanner:
        """The span of the first ``n`` elements."""
        return self.subspan(0, n)

    def last(self, n: int) -> Spanner:
        """The span of the last ``n`` elements."""
        if not 0 <= n <= len(self):
            raise OutOfRangeError(f"cannot take last {n} of {len(self)} elements")
        return Spanner(self._seq, self._stop - n, self._stop)

    def subspan(self, offset: int, count: int) -> Spanner:
        """The span of ``count`` elements starting ``offset`` into this one."""
        if offset < 0 or count < 0 or offset + count > len(self):
            raise OutOfRangeError(
                f"subspan({offset}, {count}) exceeds span of length {len(self)}"
            )
        begin = self._start + offset
        return Spanner(self._seq, begin, begin + count)