from dsakit.stack import Stack


def test_stack_basic():
    s = Stack()
    assert s.is_empty() is True
    s.push(1)
    s.push(2)
    s.push(3)
    assert len(s) == 3
    assert s.peek() == 3
    assert len(s) == 3
    assert s.pop() == 3
    assert len(s) == 2
    assert s.is_empty() is False


def test_pop_and_peek_on_empty_return_none():
    s = Stack()
    assert s.pop() is None
    assert s.peek() is None
    assert len(s) == 0


def test_lifo_order():
    s = Stack()
    for value in "abc":
        s.push(value)
    assert [s.pop(), s.pop(), s.pop()] == ["c", "b", "a"]
    assert s.is_empty() is True