import pytest

from spgrb.vector import Vector


def test_empty_vector():
    v = Vector(10)
    assert v.shape == 10
    assert len(v) == 0
    assert list(v) == []


def test_iteration_is_ordered_and_repeatable():
    v = Vector(10)
    v.insert_many([(7, 1.0), (2, 2.0), (5, 3.0)])
    assert list(v) == [(2, 2.0), (5, 3.0), (7, 1.0)]
    assert list(v) == list(v)


def test_setitem_and_getitem():
    v = Vector(10)
    v[1] = 12
    assert v[1] == 12
    assert len(v) == 1
    v[1] = 13
    assert v[1] == 13
    assert len(v) == 1


def test_getitem_missing_and_out_of_range():
    v = Vector(3)
    v[2] = 5
    with pytest.raises(KeyError):
        v[0]
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1] = 1
    assert list(v) == [(2, 5)]
    assert len(v) == 1


def test_find_and_contains():
    v = Vector(5)
    v.insert((3, 9))
    assert v.find(3) == (3, 9)
    assert v.find(2) is None
    assert v.find(99) is None
    assert 3 in v
    assert 4 not in v
    assert 99 not in v


def test_insert_existing_keeps_value():
    v = Vector(4)
    assert v.insert((2, 5)) == ((2, 5), True)
    assert v.insert((2, 8)) == ((2, 5), False)
    assert v[2] == 5


def test_insert_or_assign():
    v = Vector(4)
    assert v.insert_or_assign(0, 1) == ((0, 1), True)
    assert v.insert_or_assign(0, 2) == ((0, 2), False)
    assert v[0] == 2
    assert len(v) == 1


def test_reshape_smaller_recounts():
    v = Vector(10)
    v.insert_many([(1, 1), (5, 2), (9, 3)])
    v.reshape(6)
    assert v.shape == 6
    assert len(v) == 2
    assert list(v) == [(1, 1), (5, 2)]


def test_reshape_larger_keeps_entries():
    v = Vector(3)
    v[2] = 4
    v.reshape(8)
    assert v.shape == 8
    assert list(v) == [(2, 4)]
    v[7] = 1
    assert len(v) == 2


def test_clear():
    v = Vector(5)
    v.insert_many([(0, 1), (4, 2)])
    v.clear()
    assert v.shape == 5
    assert len(v) == 0
    assert 0 not in v


def test_from_entries_copies():
    source = Vector(6)
    source.insert_many([(0, 1.5), (3, 2.5)])
    copy = Vector.from_entries(source)
    assert copy == source
    copy[1] = 7.0
    assert 1 not in source
    assert len(copy) == 3


def test_negative_shape_raises():
    with pytest.raises(ValueError):
        Vector(-2)