"""A bounded stack, a ring-buffer queue and a linked queue."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BoundedStack", "CircularQueue", "LinkedQueue", "reverse_stack"]


class BoundedStack:
    """A LIFO stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when full."""
        if len(self._items) == self.capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("no element in stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class CircularQueue:
    """A FIFO queue over a fixed ring of ``size`` slots."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._count = 0

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; raise OverflowError when full."""
        if self.is_full:
            raise OverflowError("queue is full")
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._count:
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return value

    def peek(self) -> Any:
        """Return the front item; raise IndexError when empty."""
        if not self._count:
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """An unbounded FIFO queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._count = 0

    def push(self, value: Any) -> None:
        """Append ``value`` at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("no elements to pop")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._count -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front item; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("queue is empty")
        return self._front.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._front is not None


def reverse_stack(stack: list) -> None:
    """Reverse a list used as a stack (top at the end), in place."""
    popped = []
    while stack:
        popped.append(stack.pop())
    stack.extend(popped)