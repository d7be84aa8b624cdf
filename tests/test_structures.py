import pytest

from dsakit.structures import BoundedStack, CircularQueue, LinkedQueue, reverse_stack


def test_stack_lifo_order():
    stack = BoundedStack()
    for value in (1, 2, 5):
        stack.push(value)
    assert stack.peek() == 5
    assert [stack.pop(), stack.pop(), stack.pop()] == [5, 2, 1]
    assert not stack


def test_stack_pop_empty_raises():
    stack = BoundedStack()
    stack.push(1)
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_stack_overflow():
    stack = BoundedStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_stack_default_capacity():
    stack = BoundedStack()
    assert stack.capacity == 100


def test_circular_queue_fifo_and_full():
    queue = CircularQueue(5)
    for value in range(1, 6):
        queue.enqueue(value)
    assert queue.peek() == 1
    assert queue.is_full
    with pytest.raises(OverflowError):
        queue.enqueue(6)


def test_circular_queue_wraps_around():
    queue = CircularQueue(5)
    for value in range(1, 6):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(6)
    drained = [queue.dequeue() for _ in range(len(queue))]
    assert drained == [2, 3, 4, 5, 6]
    assert len(queue) == 0


def test_circular_queue_empty():
    queue = CircularQueue(3)
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.peek()


def test_circular_queue_rejects_bad_size():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_operations():
    queue = LinkedQueue()
    for value in (1, 2, 3):
        queue.push(value)
    assert queue.peek() == 1
    assert bool(queue) is True
    assert queue.pop() == 1
    assert queue.pop() == 2
    assert queue.peek() == 3
    assert list(queue) == [3]


def test_linked_queue_empty_after_draining():
    queue = LinkedQueue()
    queue.push("x")
    queue.pop()
    assert bool(queue) is False
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()
    queue.push("y")
    assert list(queue) == ["y"]


def test_reverse_stack():
    stack = [1, 2, 3, 4, 5]
    reverse_stack(stack)
    assert stack == [5, 4, 3, 2, 1]


def test_reverse_stack_twice_restores():
    stack = list("abcdef")
    reverse_stack(stack)
    reverse_stack(stack)
    assert stack == list("abcdef")