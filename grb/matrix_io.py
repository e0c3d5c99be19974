"""Reading sparse matrices from Matrix Market coordinate files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import IO, Any, Union

from .entries import MatrixEntry

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class MMReadResult:
    """The shape and stored entries read from a Matrix Market file."""

    shape: tuple[int, int]
    entries: list[MatrixEntry] = field(default_factory=list)


@dataclass(frozen=True)
class _Header:
    shape: tuple[int, int]
    nnz: int
    pattern: bool
    symmetric: bool


def _read_header(f: IO[str], path: Any) -> _Header:
    banner = f.readline().split()
    tokens = banner + [""] * max(0, 5 - len(banner))
    if tokens[:3] != ["%%MatrixMarket", "matrix", "coordinate"]:
        raise ValueError(f"{path} could not be parsed as a Matrix Market file.")
    pattern = tokens[3] == "pattern"
    if tokens[4] == "general":
        symmetric = False
    elif tokens[4] == "symmetric":
        symmetric = True
    else:
        raise ValueError(f"{path} has an unsupported matrix type")

    while True:
        line = f.readline()
        if not line:
            raise ValueError(f"{path} has no size line.")
        if line.startswith("%") or not line.strip():
            continue
        break

    fields = line.split()
    try:
        m, n, nnz = (int(token) for token in fields[:3])
    except ValueError:
        raise ValueError(f"{path} has a malformed size line: {line.strip()!r}") from None
    return _Header((m, n), nnz, pattern, symmetric)


def _parse_scalar(token: str, scalar_type: type) -> Any:
    if scalar_type is bool:
        return float(token) != 0
    try:
        return scalar_type(token)
    except ValueError:
        if scalar_type is int:
            return int(float(token))
        raise


def _parse_entry(
    line: str, header: _Header, scalar_type: type, one_indexed: bool, path: Any
) -> tuple[int, int, Any]:
    fields = line.split()
    needed = 2 if header.pattern else 3
    if len(fields) < needed:
        raise ValueError(f"{path} has a malformed entry line: {line.strip()!r}")
    i, j = int(fields[0]), int(fields[1])
    value = scalar_type(1) if header.pattern else _parse_scalar(fields[2], scalar_type)
    if one_indexed:
        i -= 1
        j -= 1
    return i, j, value


def mmread(
    path: PathLike, scalar_type: type = float, one_indexed: bool = True
) -> MMReadResult:
    """Read a Matrix Market coordinate file.

    Symmetric files have each off-diagonal element stored at both ``(i, j)``
    and ``(j, i)``.  Raises ``ValueError`` on malformed or unsupported files,
    on elements outside the declared shape and on more elements than declared.
    """
    with open(path, encoding="utf-8") as f:
        header = _read_header(f, path)
        m, n = header.shape
        entries: list[MatrixEntry] = []
        count = 0
        for line in f:
            if not line.strip():
                continue
            i, j, value = _parse_entry(line, header, scalar_type, one_indexed, path)
            if not (0 <= i < m and 0 <= j < n):
                raise ValueError("read_MatrixMarket: file has nonzero out of bounds.")
            entries.append(MatrixEntry((i, j), value))
            if header.symmetric and i != j:
                entries.append(MatrixEntry((j, i), value))
            count += 1
            if count > header.nnz:
                raise ValueError(
                    "read_MatrixMarket: error reading Matrix Market file, "
                    "file has more nonzeros than reported."
                )
    return MMReadResult(header.shape, entries)


class MMReadMatrix:
    """A Matrix Market file read lazily, one stored entry at a time.

    Entries are yielded zero-indexed exactly as written in the file; symmetric
    entries are not mirrored, so iteration yields ``len(self)`` entries.
    """

    def __init__(self, path: PathLike, scalar_type: type = float) -> None:
        self._path = path
        self._scalar_type = scalar_type
        with open(path, encoding="utf-8") as f:
            self._header = _read_header(f, path)
            self._offset = f.tell()

    @property
    def shape(self) -> tuple[int, int]:
        """Dimensions ``(rows, columns)`` declared by the file."""
        return self._header.shape

    def __len__(self) -> int:
        return self._header.nnz

    def __iter__(self) -> Iterator[MatrixEntry]:
        with open(self._path, encoding="utf-8") as f:
            f.seek(self._offset)
            count = 0
            for line in f:
                if count >= self._header.nnz:
                    break
                if not line.strip():
                    continue
                i, j, value = _parse_entry(
                    line, self._header, self._scalar_type, True, self._path
                )
                yield MatrixEntry((i, j), value)
                count += 1