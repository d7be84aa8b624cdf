"""Searching a sorted sequence."""

from collections.abc import Sequence

__all__ = ["binary_search", "fibonacci_search"]


def binary_search(items: Sequence, key) -> int:
    """Return the index of ``key`` in the ascending ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def fibonacci_search(items: Sequence, target) -> int:
    """Return the index of ``target`` in the ascending ``items``, or -1.

    The search space is narrowed by Fibonacci numbers instead of halves.
    """
    n = len(items)
    if n == 0:
        return -1

    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < n:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, n - 1)
        if items[i] < target:
            # Step one Fibonacci number down.
            fib_m, fib_m1 = fib_m1, fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif items[i] > target:
            # Step two Fibonacci numbers down.
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < n and items[offset + 1] == target:
        return offset + 1
    return -1