import pytest

from grb.csr import CsrMatrix
from grb.entries import MatrixEntry
from grb.exceptions import InvalidArgumentError, OutOfRangeError


def test_new_matrix_is_empty():
    m = CsrMatrix((3, 4))
    assert m.shape == (3, 4)
    assert len(m) == 0
    assert list(m) == []


def test_insert_then_find():
    m = CsrMatrix((3, 4))
    ref, inserted = m.insert(((1, 2), 5.0))
    assert inserted is True
    assert ref.index == (1, 2)
    assert ref.value == 5.0
    assert m.find((1, 2)).value == 5.0
    assert len(m) == 1


def test_insert_existing_keeps_old_value():
    m = CsrMatrix((3, 4))
    m.insert(((1, 2), 5.0))
    ref, inserted = m.insert(((1, 2), 9.0))
    assert inserted is False
    assert ref.value == 5.0
    assert len(m) == 1


def test_insert_accepts_matrix_entry():
    m = CsrMatrix((2, 2))
    m.insert(MatrixEntry((0, 1), 3))
    assert m.find((0, 1)).entry() == MatrixEntry((0, 1), 3)


def test_iteration_is_row_major():
    keys = [(2, 1), (0, 3), (1, 0), (0, 1), (2, 0)]
    m = CsrMatrix((3, 4))
    m.insert_many((key, n) for n, key in enumerate(keys))
    assert [ref.index for ref in m] == sorted(keys)
    assert {ref.index: ref.value for ref in m} == {
        key: n for n, key in enumerate(keys)
    }


def test_insert_many_keeps_existing_and_first_duplicate():
    m = CsrMatrix((2, 2))
    m.insert(((0, 0), "old"))
    m.insert_many([((0, 0), "new"), ((1, 1), "first"), ((1, 1), "second")])
    assert m.find((0, 0)).value == "old"
    assert m.find((1, 1)).value == "first"
    assert len(m) == 2


def test_insert_or_assign_replaces_and_inserts():
    m = CsrMatrix((2, 2))
    _, inserted = m.insert_or_assign((1, 0), 4)
    assert inserted is True
    ref, inserted = m.insert_or_assign((1, 0), 7)
    assert inserted is False
    assert ref.value == 7
    assert m.find((1, 0)).value == 7
    assert len(m) == 1


def test_reference_writes_through():
    m = CsrMatrix((2, 3))
    m.insert_many([((0, 0), 1), ((1, 2), 2)])
    for ref in m:
        ref.value = ref.value * 10
    assert [ref.entry().to_pair() for ref in m] == [((0, 0), 10), ((1, 2), 20)]


def test_find_missing_returns_none():
    m = CsrMatrix((2, 2))
    m.insert(((0, 0), 1))
    assert m.find((1, 1)) is None
    assert m.find((5, 5)) is None


def test_insert_out_of_bounds_raises():
    m = CsrMatrix((2, 2))
    with pytest.raises(OutOfRangeError):
        m.insert(((2, 0), 1))
    with pytest.raises(OutOfRangeError):
        m.insert_or_assign((0, 2), 1)
    with pytest.raises(OutOfRangeError):
        m.insert_many([((0, 0), 1), ((-1, 0), 1)])
    assert len(m) == 0


def test_negative_shape_raises():
    with pytest.raises(InvalidArgumentError):
        CsrMatrix((-1, 2))


def test_reshape_shrink_drops_outside_elements():
    m = CsrMatrix((4, 4))
    m.insert_many([((0, 0), 1), ((1, 3), 2), ((3, 1), 3), ((2, 2), 4)])
    m.reshape((3, 3))
    assert m.shape == (3, 3)
    assert [ref.index for ref in m] == [(0, 0), (2, 2)]
    assert m.find((3, 1)) is None


def test_reshape_grow_keeps_elements():
    m = CsrMatrix((2, 2))
    m.insert_many([((0, 1), 1), ((1, 0), 2)])
    m.reshape((5, 6))
    assert m.shape == (5, 6)
    assert [ref.index for ref in m] == [(0, 1), (1, 0)]
    m.insert(((4, 5), 3))
    assert m.find((4, 5)).value == 3
    assert len(m) == 3


def test_nbytes_of_empty_matrix_counts_row_pointers():
    assert CsrMatrix((2, 3)).nbytes() == 24


def test_nbytes_grows_with_entries_and_packs_booleans():
    floats = CsrMatrix((3, 3))
    bools = CsrMatrix((3, 3))
    empty = floats.nbytes()
    floats.insert_many([((0, 0), 1.0), ((1, 1), 2.0), ((2, 2), 3.0)])
    bools.insert_many([((0, 0), True), ((1, 1), False), ((2, 2), True)])
    assert floats.nbytes() > empty
    assert empty < bools.nbytes() < floats.nbytes()