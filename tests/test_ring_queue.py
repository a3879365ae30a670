from collections import deque

import pytest
from hypothesis import given, strategies as st

from xcorekit.ring_queue import RingQueue


def test_new_queue_state():
    queue = RingQueue(5)
    assert queue.capacity() == 5
    assert len(queue) == 0
    assert queue.empty() is True
    assert queue.full() is False


def test_fifo_order_with_wrap():
    queue = RingQueue(4)
    for value in range(4):
        queue.push_back(value)
    assert queue.full() is True
    assert queue.pop_front() == 0
    assert queue.pop_front() == 1
    queue.push_back(4)
    queue.push_back(5)
    assert list(queue) == [2, 3, 4, 5]
    assert [queue.pop_front() for _ in range(4)] == [2, 3, 4, 5]
    assert queue.empty() is True


def test_push_front_and_back():
    queue = RingQueue(4)
    queue.push_back("b")
    queue.push_front("a")
    queue.push_back("c")
    assert list(queue) == ["a", "b", "c"]
    assert queue.front() == "a"
    assert queue.back() == "c"
    assert queue.pop_back() == "c"
    assert queue.pop_front() == "a"
    assert list(queue) == ["b"]


def test_indexing_and_assignment():
    queue = RingQueue(3)
    queue.push_back(10)
    queue.push_front(20)
    queue.push_back(30)
    assert [queue[i] for i in range(3)] == [20, 10, 30]
    assert queue[-1] == 30
    queue[1] = 99
    assert list(queue) == [20, 99, 30]


def test_index_out_of_range_raises():
    queue = RingQueue(3)
    queue.push_back(1)
    with pytest.raises(IndexError):
        queue[1]
    with pytest.raises(IndexError):
        queue[1] = 5
    assert list(queue) == [1]
    assert len(queue) == 1


def test_full_queue_rejects_push():
    queue = RingQueue(2)
    queue.push_back(1)
    queue.push_front(0)
    with pytest.raises(OverflowError):
        queue.push_back(2)
    with pytest.raises(OverflowError):
        queue.push_front(2)
    assert list(queue) == [0, 1]


def test_empty_queue_operations_raise():
    queue = RingQueue(2)
    for operation in (queue.front, queue.back, queue.pop_front, queue.pop_back):
        with pytest.raises(IndexError):
            operation()


def test_clear_resets():
    queue = RingQueue(3)
    queue.push_back(1)
    queue.push_back(2)
    queue.clear()
    assert len(queue) == 0
    queue.push_front(7)
    assert list(queue) == [7]


def test_zero_capacity():
    queue = RingQueue(0)
    assert queue.full() is True
    with pytest.raises(OverflowError):
        queue.push_back(1)


@given(st.lists(st.tuples(
    st.sampled_from(["push_back", "push_front", "pop_back", "pop_front"]),
    st.integers(),
), max_size=60))
def test_matches_deque_model(operations):
    queue = RingQueue(6)
    model = deque()
    for name, value in operations:
        if name == "push_back" and len(model) < 6:
            queue.push_back(value)
            model.append(value)
        elif name == "push_front" and len(model) < 6:
            queue.push_front(value)
            model.appendleft(value)
        elif name == "pop_back" and model:
            assert queue.pop_back() == model.pop()
        elif name == "pop_front" and model:
            assert queue.pop_front() == model.popleft()
        assert list(queue) == list(model)
        assert len(queue) == len(model)