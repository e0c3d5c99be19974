import pytest

from grb.dense_vector import DenseVector
from grb.exceptions import InvalidArgumentError, OutOfRangeError


def test_new_vector_empty():
    v = DenseVector(10)
    assert v.shape == 10
    assert len(v) == 0
    assert list(v) == []


def test_setitem_getitem_round_trip():
    v = DenseVector(10)
    v[1] = 12
    assert v[1] == 12
    assert len(v) == 1
    assert [ref.to_pair() if hasattr(ref, "to_pair") else (ref.index, ref.value) for ref in v] == [(1, 12)]


def test_getitem_absent_inserts_default():
    v = DenseVector(5)
    assert v[3] == 0
    assert v.find(3) is not None
    assert len(v) == 1


def test_insert_keeps_existing_value():
    v = DenseVector(4)
    ref, inserted = v.insert((2, 5))
    assert inserted and ref.value == 5
    ref, inserted = v.insert((2, 9))
    assert not inserted
    assert ref.value == 5


def test_insert_or_assign_replaces():
    v = DenseVector(4)
    _, new = v.insert_or_assign(0, 1)
    assert new
    ref, new = v.insert_or_assign(0, 3)
    assert not new
    assert v.find(0).value == 3
    assert len(v) == 1


def test_iteration_in_index_order_and_writable():
    v = DenseVector(8)
    v.insert_many([(6, 1), (2, 1), (4, 1)])
    assert [ref.index for ref in v] == [2, 4, 6]
    for ref in v:
        ref.value = ref.value + 2
    assert [ref.value for ref in v] == [3, 3, 3]


def test_find_absent_and_out_of_range():
    v = DenseVector(3)
    assert v.find(1) is None
    assert v.find(10) is None


def test_reshape_smaller_recounts():
    v = DenseVector(6)
    v.insert_many([(0, 1), (5, 2)])
    v.reshape(3)
    assert v.shape == 3
    assert len(v) == 1
    assert [ref.index for ref in v] == [0]


def test_reshape_larger_keeps_elements():
    v = DenseVector(2)
    v[1] = 7
    v.reshape(6)
    assert v.shape == 6
    assert v.find(1).value == 7
    assert v.find(5) is None


def test_clear():
    v = DenseVector(4)
    v[0] = 1
    v.clear()
    assert len(v) == 0
    assert v.shape == 4
    assert v.find(0) is None


def test_out_of_range_raises():
    v = DenseVector(3)
    with pytest.raises(OutOfRangeError):
        v[3] = 1
    with pytest.raises(OutOfRangeError):
        v.insert((-1, 1))


def test_negative_shape_raises():
    with pytest.raises(InvalidArgumentError):
        DenseVector(-2)