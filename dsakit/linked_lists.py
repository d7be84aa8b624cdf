"""Singly, doubly and circular linked lists."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SinglyLinkedList", "DoublyLinkedList", "CircularLinkedList"]


@dataclass(eq=False)
class _Link:
    value: Any
    next: Optional["_Link"] = None


@dataclass(eq=False)
class _DoubleLink:
    value: Any
    prev: Optional["_DoubleLink"] = None
    next: Optional["_DoubleLink"] = None


class SinglyLinkedList:
    """A list of values chained by forward links."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        self._head = _Link(value, self._head)
        if self._tail is None:
            self._tail = self._head

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        link = _Link(value)
        if self._tail is None:
            self._head = self._tail = link
        else:
            self._tail.next = link
            self._tail = link

    def delete(self, value: Any) -> None:
        """Remove the first element equal to ``value``.

        Raises ValueError if no element is equal to it.
        """
        previous = None
        link = self._head
        while link is not None and link.value != value:
            previous, link = link, link.next
        if link is None:
            raise ValueError(f"{value!r} is not in the list")
        if previous is None:
            self._head = link.next
        else:
            previous.next = link.next
        if link is self._tail:
            self._tail = previous

    def reverse(self) -> None:
        """Reverse the list in place by relinking iteratively."""
        previous = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self._head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place by relinking recursively."""

        def relink(link: Optional[_Link]) -> Optional[_Link]:
            if link is None or link.next is None:
                return link
            new_head = relink(link.next)
            link.next.next = link
            link.next = None
            return new_head

        self._tail = self._head
        self._head = relink(self._head)

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)


class DoublyLinkedList:
    """A list of values chained by forward and backward links."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_DoubleLink] = None
        self._tail: Optional[_DoubleLink] = None
        self._count = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        link = _DoubleLink(value, None, self._head)
        if self._head is None:
            self._tail = link
        else:
            self._head.prev = link
        self._head = link
        self._count += 1

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        link = _DoubleLink(value, self._tail, None)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._count += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``.

        Raises IndexError when the position is outside the list.
        """
        if not 1 <= position <= self._count:
            raise IndexError("position out of range")
        link = self._head
        for _ in range(position - 1):
            link = link.next
        if link.prev is None:
            self._head = link.next
        else:
            link.prev.next = link.next
        if link.next is None:
            self._tail = link.prev
        else:
            link.next.prev = link.prev
        self._count -= 1
        return link.value

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __reversed__(self) -> Iterator[Any]:
        link = self._tail
        while link is not None:
            yield link.value
            link = link.prev

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return "".join(f"{value} --> " for value in self) + "NULL"


class CircularLinkedList:
    """A singly linked list whose last element links back to the first."""

    def __init__(self, values: Iterable = ()) -> None:
        # The tail is kept; its successor is the head.
        self._tail: Optional[_Link] = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the first element."""
        link = _Link(value)
        if self._tail is None:
            link.next = link
            self._tail = link
        else:
            link.next = self._tail.next
            self._tail.next = link

    def insert_at_tail(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        self.insert_at_head(value)
        self._tail = self._tail.next

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        head = self._tail.next
        link = head
        while True:
            yield link.value
            link = link.next
            if link is head:
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)