"""Hash tables: linear probing over keys and a direct key/data table."""

from typing import Optional

__all__ = [
    "ProbingTable",
    "is_prime",
    "next_prime",
    "CollisionError",
    "DirectHashTable",
]


class CollisionError(ValueError):
    """Raised when a slot is already taken by a different key."""


class ProbingTable:
    """A fixed-size table of integer keys resolved by linear probing."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._slots: list[Optional[int]] = [None] * size

    def _probe(self, key: int):
        size = len(self._slots)
        start = key % size
        return ((start + step) % size for step in range(size))

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot and return its index.

        Raises OverflowError when no slot is free.
        """
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise OverflowError("element cannot be inserted")

    def search(self, key: int) -> Optional[int]:
        """Return the index holding ``key``, or None if it is absent."""
        for index in self._probe(key):
            if self._slots[index] == key:
                return index
        return None

    def rows(self) -> list[tuple[int, Optional[int]]]:
        """Return ``(index, key)`` for every slot, None marking an empty one."""
        return list(enumerate(self._slots))


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(n: int) -> int:
    """Return the smallest odd prime at or above ``n`` (``n + 1`` if even)."""
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n


class DirectHashTable:
    """A table with one slot per hash value and no collision resolution.

    The capacity is raised to the next prime.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = next_prime(capacity)
        self._slots: list[Optional[tuple[int, object]]] = [None] * self.capacity
        self._size = 0

    def _index(self, key: int) -> int:
        return key % self.capacity

    def insert(self, key: int, data: object) -> None:
        """Store ``data`` under ``key``, replacing it if the key is present.

        Raises CollisionError when the slot holds a different key.
        """
        index = self._index(key)
        slot = self._slots[index]
        if slot is None:
            self._size += 1
        elif slot[0] != key:
            raise CollisionError(f"slot {index} already holds key {slot[0]}")
        self._slots[index] = (key, data)

    def remove(self, key: int) -> None:
        """Delete ``key``; raise KeyError if it is not stored."""
        index = self._index(key)
        slot = self._slots[index]
        if slot is None or slot[0] != key:
            raise KeyError(key)
        self._slots[index] = None
        self._size -= 1

    def get(self, key: int, default: object = None) -> object:
        """Return the data stored under ``key``, or ``default``."""
        slot = self._slots[self._index(key)]
        if slot is None or slot[0] != key:
            return default
        return slot[1]

    def slots(self) -> list[Optional[tuple[int, object]]]:
        """Return ``(key, data)`` per slot, None marking an empty one."""
        return list(self._slots)

    def __contains__(self, key: int) -> bool:
        slot = self._slots[self._index(key)]
        return slot is not None and slot[0] == key

    def __len__(self) -> int:
        return self._size