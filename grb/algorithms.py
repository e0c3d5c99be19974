"""Whole-container operations: assignment, element-wise combination,
multiplication and reduction."""

from __future__ import annotations

import operator
from collections import Counter, defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .dense_vector import DenseVector
from .entries import get
from .exceptions import InvalidArgumentError
from .matrix import Matrix
from .monoid import plus


@dataclass(frozen=True)
class Semiring:
    """A pair of operators: ``combine`` multiplies, ``reduce`` adds up products."""

    combine: Callable[[Any, Any], Any] = operator.mul
    reduce: Callable[[Any, Any], Any] = plus


def _is_matrix(container: Any) -> bool:
    return isinstance(container.shape, tuple)


def _selects(mask: Any, index: Any) -> bool:
    """Whether ``mask`` stores a true value at ``index``; ``None`` selects all."""
    if mask is None:
        return True
    hit = mask.find(index)
    return hit is not None and bool(get(1, hit))


def _contains(mask: Any, index: Any) -> bool:
    """Whether ``mask`` stores any value at ``index``; ``None`` holds all."""
    return mask is None or mask.find(index) is not None


def _fill(target: Any, value: Any) -> None:
    if _is_matrix(target):
        m, n = target.shape
        target.clear()
        target.insert_many(((i, j), value) for i in range(m) for j in range(n))
    else:
        for i in range(target.shape):
            target[i] = value


def assign(target: Any, source: Any) -> None:
    """Make ``target`` hold exactly the elements of ``source``.

    ``source`` is a matrix or vector of the same shape as ``target``, or a
    scalar that is then stored at every index of ``target``.
    """
    if not hasattr(source, "shape"):
        _fill(target, source)
        return
    if target.shape != source.shape:
        raise InvalidArgumentError("assign: dimensions of a and b do not match.")
    entries = [(get(0, entry), get(1, entry)) for entry in source]
    target.clear()
    target.insert_many(entries)


def _ewise_result(name: str, a: Any, b: Any, mask: Any) -> Any:
    if _is_matrix(a) != _is_matrix(b):
        raise InvalidArgumentError(f"{name}: cannot combine a matrix with a vector.")
    if _is_matrix(a):
        if tuple(a.shape) != tuple(b.shape):
            raise InvalidArgumentError(
                f"{name}: Dimensions of matrices are incompatible."
            )
        if mask is not None and (
            mask.shape[0] < a.shape[0] or mask.shape[1] < a.shape[1]
        ):
            raise InvalidArgumentError(
                f"{name}: Mask has smaller dimensions than matrices."
            )
        return Matrix(a.shape)
    if a.shape != b.shape:
        raise InvalidArgumentError(
            f"{name}: Dimensions of vectors ({a.shape} and {b.shape}) "
            "are incompatible."
        )
    if mask is not None and mask.shape < a.shape:
        raise InvalidArgumentError(f"{name}: Mask has smaller dimensions than vectors.")
    return DenseVector(a.shape)


def ewise_intersection(
    a: Any, b: Any, combine: Callable[[Any, Any], Any], mask: Any = None
) -> Any:
    """Combine the elements stored in both ``a`` and ``b`` with ``combine``.

    Only indices at which ``mask`` holds a true value are considered; without
    a mask every index is.
    """
    c = _ewise_result("ewise_intersection", a, b, mask)
    out = []
    for entry in a:
        index = get(0, entry)
        if not _selects(mask, index):
            continue
        hit = b.find(index)
        if hit is not None:
            out.append((index, combine(get(1, entry), get(1, hit))))
    c.insert_many(out)
    return c


def ewise_union(
    a: Any, b: Any, combine: Callable[[Any, Any], Any], mask: Any = None
) -> Any:
    """Merge ``a`` and ``b``: shared indices are combined, others copied.

    Only indices at which ``mask`` holds a true value are considered; without
    a mask every index is.
    """
    c = _ewise_result("ewise_union", a, b, mask)
    out = []
    matched = 0
    for entry in a:
        index = get(0, entry)
        if not _selects(mask, index):
            continue
        hit = b.find(index)
        if hit is not None:
            out.append((index, combine(get(1, entry), get(1, hit))))
            matched += 1
        else:
            out.append((index, get(1, entry)))
    if matched < len(b):
        out.extend(
            (get(0, entry), get(1, entry))
            for entry in b
            if _selects(mask, get(0, entry))
        )
    c.insert_many(out)
    return c


def _check_product(a: Any, b: Any) -> None:
    if a.shape[1] != b.shape[0]:
        raise InvalidArgumentError(
            "Dimensions of matrices given to multiply() are not compatible."
        )


def multiply(a: Any, b: Any) -> Matrix:
    """Conventional matrix product of ``a`` and ``b`` using ``*`` and ``+``."""
    _check_product(a, b)
    m = a.shape[0]
    n = b.shape[1]

    rows: defaultdict[int, list[tuple[int, Any]]] = defaultdict(list)
    for entry in b:
        k, j = get(0, entry)
        rows[k].append((j, get(1, entry)))
    for row in rows.values():
        row.sort(key=operator.itemgetter(0))

    acc: dict[tuple[int, int], Any] = {}
    for entry in a:
        i, k = get(0, entry)
        a_value = get(1, entry)
        for j, b_value in rows.get(k, ()):
            acc[(i, j)] = acc.get((i, j), 0) + a_value * b_value

    c = Matrix((m, n))
    c.insert_many(acc.items())
    return c


def sum_values(matrix: Any) -> Any:
    """Sum of every stored value, starting from ``0``."""
    total = 0
    for entry in matrix:
        total += get(1, entry)
    return total


def mxv(
    a: Any,
    b: Any,
    c: Any,
    mask: Any = None,
    semiring: Semiring = Semiring(),
    accumulator: Callable[[Any, Any], Any] = plus,
    alpha: Any = 1,
    merge: bool = True,
) -> DenseVector:
    """Return ``mask(alpha*c + a*b)``, plus ``c`` outside the mask if ``merge``.

    Products use ``semiring``; ``c`` is folded in with ``accumulator``.  An
    index belongs to the mask when the mask stores any value there, and the
    masked results are finally scaled by the stored mask value.  ``c`` itself
    is left unchanged.
    """
    out = DenseVector(c.shape)

    for entry in a:
        i, k = get(0, entry)
        hit = b.find(k)
        if hit is not None and _contains(mask, i):
            product = semiring.combine(get(1, entry), get(1, hit))
            previous = out.find(i)
            out[i] = (
                product
                if previous is None
                else semiring.reduce(previous.value, product)
            )

    for entry in c:
        i = get(0, entry)
        value = get(1, entry)
        if _contains(mask, i):
            if alpha != 0:
                previous = out.find(i)
                current = previous.value if previous is not None else 0
                out[i] = accumulator(current, alpha * value)
        elif merge:
            out[i] = value

    if mask is not None:
        for entry in mask:
            i = get(0, entry)
            hit = out.find(i)
            if hit is not None:
                out[i] = get(1, entry) * hit.value

    return out


def multiply_flops(a: Any, b: Any) -> int:
    """Number of scalar multiplications needed to form the product ``a*b``."""
    _check_product(a, b)
    a_nnz = Counter(get(0, entry)[1] for entry in a)
    b_nnz = Counter(get(0, entry)[0] for entry in b)
    return sum(count * b_nnz[k] for k, count in a_nnz.items())


def reduce(
    a: Any, op: Callable[[Any, Any], Any] = plus, mask: Any = None
) -> DenseVector:
    """Reduce each row of ``a`` with ``op`` into a vector.

    Each new value is combined as ``op(new, accumulated)``.  Rows for which
    ``mask`` stores no value are skipped; rows without elements stay empty.
    """
    v = DenseVector(a.shape[0])
    for entry in a:
        row = get(0, entry)[0]
        value = get(1, entry)
        if _contains(mask, row):
            hit = v.find(row)
            if hit is not None:
                value = op(value, hit.value)
            v.insert_or_assign(row, value)
    return v