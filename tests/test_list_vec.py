import pytest

from dsakit.list_vec import LVec


def test_vec_source_case():
    list_vec = LVec()
    assert len(list_vec) == 0
    assert list_vec.is_empty() is True

    list_vec.push(0)
    list_vec.push(1)
    list_vec.insert(2, 2)
    assert list(list_vec) == [0, 1, 2]

    val = list_vec.remove(0)
    assert val == 0

    val = list_vec.pop()
    assert val == 2
    assert list(list_vec) == [1]

    list_vec.clear()
    assert len(list_vec) == 0
    assert list_vec.is_empty() is True

    other = LVec()
    other.push(2)
    list_vec.append(other)
    assert list(list_vec) == [2]
    assert len(other) == 0
    assert other.is_empty()


def test_insert_at_front_and_middle():
    v = LVec()
    for x in (1, 3):
        v.push(x)
    v.insert(0, 0)
    v.insert(2, 2)
    assert list(v) == [0, 1, 2, 3]
    assert len(v) == 4


def test_insert_past_end_appends():
    v = LVec()
    v.push("a")
    v.insert(100, "b")
    assert list(v) == ["a", "b"]


def test_insert_into_empty():
    v = LVec()
    v.insert(5, "x")
    assert list(v) == ["x"]
    assert len(v) == 1


def test_insert_negative_index_raises():
    v = LVec()
    with pytest.raises(IndexError):
        v.insert(-1, 1)


def test_remove_out_of_range_returns_none():
    v = LVec()
    v.push(1)
    assert v.remove(1) is None
    assert v.remove(-1) is None
    assert list(v) == [1]


def test_remove_middle():
    v = LVec()
    for x in range(5):
        v.push(x)
    assert v.remove(2) == 2
    assert list(v) == [0, 1, 3, 4]
    assert len(v) == 4


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LVec().pop()


def test_pop_returns_in_reverse_order():
    v = LVec()
    items = [5, 6, 7]
    for x in items:
        v.push(x)
    popped = [v.pop() for _ in range(len(items))]
    assert popped == list(reversed(items))
    assert v.is_empty()


def test_append_keeps_order():
    a = LVec()
    b = LVec()
    for x in (1, 2):
        a.push(x)
    for x in (3, 4):
        b.push(x)
    a.append(b)
    assert list(a) == [1, 2, 3, 4]
    assert list(b) == []


def test_append_self_raises():
    v = LVec()
    v.push(1)
    with pytest.raises(ValueError):
        v.append(v)