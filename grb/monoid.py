"""Binary operators and the identity elements that make them monoids."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any


def plus(a: Any, b: Any) -> Any:
    """Return ``a + b``; the default reduction operator."""
    return a + b


_ADDITIVE = (plus, operator.add)


def _call_provider(provider: Callable, scalar_type: type) -> Any:
    try:
        return provider(scalar_type)
    except TypeError:
        return provider()


def identity(fn: Callable, scalar_type: type) -> Any:
    """Return the identity element of ``fn`` for values of ``scalar_type``.

    Addition has identity ``scalar_type(0)``.  Any other operator must carry
    an ``identity`` attribute: a value, a callable taking no arguments, or a
    callable taking the scalar type.  Raises ``TypeError`` if no identity is
    known or it is not of ``scalar_type``.
    """
    if any(fn is op for op in _ADDITIVE):
        return scalar_type(0)

    provider = getattr(fn, "identity", None)
    if provider is None:
        raise TypeError(f"{fn!r} has no identity element")

    value = _call_provider(provider, scalar_type) if callable(provider) else provider
    if not isinstance(value, scalar_type):
        raise TypeError(
            f"identity of {fn!r} is {type(value).__name__}, "
            f"not {scalar_type.__name__}"
        )
    return value


def is_binary_op(fn: Callable, a: Any, b: Any) -> bool:
    """Whether ``fn`` can be applied to the operands ``a`` and ``b``."""
    try:
        fn(a, b)
    except TypeError:
        return False
    return True


def is_monoid(fn: Callable, scalar_type: type) -> bool:
    """Whether ``fn`` is a binary operator on ``scalar_type`` with an identity."""
    try:
        zero = identity(fn, scalar_type)
    except TypeError:
        return False
    return is_binary_op(fn, zero, zero)