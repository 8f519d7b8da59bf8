import pytest

from dsakit.linked_list import LinkedList, ListStack


def _filled():
    lst = LinkedList()
    lst.push(1)
    lst.push(2)
    lst.push(3)
    return lst


def test_basic():
    lst = _filled()
    assert lst.pop() == 3
    assert lst.peek() == 2
    assert lst.replace_head(4) == 2
    assert lst.peek() == 4
    assert len(lst) == 2


def test_drain():
    lst = _filled()
    it = lst.drain()
    assert next(it) == 3
    assert next(it) == 2
    assert next(it) == 1
    assert next(it, None) is None
    assert lst.is_empty() is True


def test_iter():
    lst = _filled()
    it = iter(lst)
    assert next(it) == 3
    assert next(it) == 2
    assert next(it) == 1
    assert next(it, None) is None
    assert len(lst) == 3


def test_iter_after_replace():
    lst = _filled()
    lst.replace_head(30)
    assert list(lst) == [30, 2, 1]


def test_empty_list():
    lst = LinkedList()
    assert lst.is_empty() is True
    assert lst.pop() is None
    assert lst.peek() is None
    with pytest.raises(IndexError):
        lst.replace_head(1)


def test_list_stack():
    s = ListStack()
    s.push(1)
    s.push(2)
    s.push(4)
    assert s.peek() == 4
    assert s.pop() == 4
    assert len(s) == 2
    assert s.is_empty() is False


def test_list_stack_empty():
    s = ListStack()
    assert s.is_empty() is True
    assert s.pop() is None
    assert s.peek() is None