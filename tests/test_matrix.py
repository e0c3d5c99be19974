import pytest

from grb.exceptions import InvalidArgumentError, OutOfRangeError
from grb.matrix import Matrix


def _write(tmp_path, text):
    path = tmp_path / "m.mtx"
    path.write_text(text)
    return path


def test_new_matrix_is_empty_with_shape():
    m = Matrix((10, 10))
    assert m.shape == (10, 10)
    assert len(m) == 0
    assert m.empty()


def test_setitem_and_getitem_round_trip():
    m = Matrix((10, 10))
    m[7, 7] = 12
    m[2, 3] = 5
    assert m[7, 7] == 12
    assert m[2, 3] == 5
    assert not m.empty()
    assert {ref.index: ref.value for ref in m} == {(7, 7): 12, (2, 3): 5}


def test_getitem_of_absent_inserts_default():
    m = Matrix((4, 4))
    before = len(m)
    assert m[1, 2] == 0
    assert len(m) == before + 1
    assert m.find((1, 2)) is not None


def test_insert_does_not_overwrite():
    m = Matrix((5, 5))
    ref, inserted = m.insert(((1, 1), 3))
    assert inserted
    assert ref.value == 3
    ref, inserted = m.insert(((1, 1), 9))
    assert not inserted
    assert ref.value == 3


def test_insert_or_assign_overwrites():
    m = Matrix((5, 5))
    _, new = m.insert_or_assign((0, 4), 1)
    assert new
    ref, new = m.insert_or_assign((0, 4), 8)
    assert not new
    assert ref.value == 8
    assert m[0, 4] == 8


def test_iteration_is_row_major_and_writable():
    m = Matrix((10, 10))
    cells = [(9, 6), (2, 7), (5, 5), (2, 3), (7, 1)]
    for cell in cells:
        m[cell] = 12
    assert [ref.index for ref in m] == sorted(cells)
    for ref in m:
        ref.value += 2
    assert all(ref.value == 14 for ref in m)


def test_insert_many_and_find():
    m = Matrix((3, 3))
    entries = [((0, 1), 1.5), ((2, 2), 4.0)]
    m.insert_many(entries)
    assert len(m) == len(entries)
    assert m.find((0, 1)).value == 1.5
    assert m.find((1, 1)) is None


def test_clear_keeps_shape():
    m = Matrix((3, 4))
    m[1, 1] = 1
    m.clear()
    assert m.empty()
    assert m.shape == (3, 4)


def test_reshape_discards_outside():
    m = Matrix((5, 5))
    m[0, 0] = 1
    m[4, 4] = 2
    m.reshape((2, 2))
    assert m.shape == (2, 2)
    assert [ref.index for ref in m] == [(0, 0)]


def test_out_of_bounds_raises():
    m = Matrix((2, 2))
    with pytest.raises(OutOfRangeError):
        m[2, 0] = 1
    assert len(m) == 0
    assert m.shape == (2, 2)


def test_negative_shape_raises():
    with pytest.raises(InvalidArgumentError):
        Matrix((-1, 2))


def test_from_file_symmetric(tmp_path):
    path = _write(
        tmp_path,
        "%%MatrixMarket matrix coordinate real symmetric\n"
        "% comment\n"
        "3 3 2\n"
        "1 1 1.5\n"
        "3 1 2.0\n",
    )
    m = Matrix.from_file(path, float)
    assert m.shape == (3, 3)
    assert {ref.index: ref.value for ref in m} == {
        (0, 0): 1.5,
        (2, 0): 2.0,
        (0, 2): 2.0,
    }


def test_from_file_default_uses_scalar_type(tmp_path):
    path = _write(
        tmp_path,
        "%%MatrixMarket matrix coordinate integer general\n2 2 1\n1 2 7\n",
    )
    m = Matrix.from_file(path, int)
    assert m[0, 1] == 7
    value = m[1, 1]
    assert value == int()
    assert isinstance(value, int)


def test_from_file_rejects_bad_banner(tmp_path):
    path = _write(tmp_path, "not a matrix\n1 1 0\n")
    with pytest.raises(ValueError):
        Matrix.from_file(path)