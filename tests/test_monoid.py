import operator

import pytest

from grb.monoid import identity, is_binary_op, is_monoid, plus


class _Times:
    def __call__(self, a, b):
        return a * b

    @staticmethod
    def identity():
        return 1


class _Min:
    def __call__(self, a, b):
        return min(a, b)

    @staticmethod
    def identity(scalar_type):
        return scalar_type(10**9)


def test_plus_adds():
    assert plus(2, 3) == 5
    assert plus("a", "b") == "ab"


def test_identity_of_addition_is_zero():
    assert identity(plus, int) == 0
    assert identity(operator.add, float) == 0.0
    assert isinstance(identity(plus, float), float)


def test_identity_from_zero_argument_method():
    times = _Times()
    assert identity(times, int) == 1
    assert times(identity(times, int), 7) == 7


def test_identity_from_typed_method_is_neutral():
    op = _Min()
    e = identity(op, int)
    for x in (-5, 0, 42):
        assert op(e, x) == x


def test_identity_missing_raises():
    with pytest.raises(TypeError):
        identity(max, int)


def test_identity_of_wrong_type_raises():
    with pytest.raises(TypeError):
        identity(_Times(), str)


def test_is_binary_op():
    assert is_binary_op(plus, 1, 2) is True
    assert is_binary_op(plus, 1, "a") is False


def test_is_monoid():
    assert is_monoid(plus, int) is True
    assert is_monoid(_Times(), int) is True
    assert is_monoid(max, int) is False