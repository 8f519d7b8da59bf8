import pytest

from dsakit.queue import CapacityError, Queue, hot_potato


def test_queue():
    q = Queue(3)
    assert q.is_empty() is True
    q.enqueue(1)
    q.enqueue(2)
    q.enqueue(3)
    with pytest.raises(CapacityError, match="No space available"):
        q.enqueue(4)
    assert len(q) == 3
    assert q.dequeue() == 1
    assert len(q) == 2
    assert q.is_empty() is False


def test_fifo_order_and_empty_dequeue():
    q = Queue(5)
    for value in (10, 20, 30):
        q.enqueue(value)
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [10, 20, 30]
    assert q.dequeue() is None


def test_hot_potato():
    names = ["Shieber", "David", "Susan", "Jane", "Kew", "Brad"]
    assert hot_potato(names, 8) == "Kew"


def test_hot_potato_single_name():
    assert hot_potato(["Solo"], 3) == "Solo"


def test_hot_potato_empty():
    with pytest.raises(ValueError):
        hot_potato([], 3)