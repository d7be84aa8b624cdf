"""Array puzzles and Fibonacci numbers."""

from collections.abc import Iterable, Sequence

__all__ = [
    "three_sum_closest",
    "increasing_triplet",
    "count_monotonic_subarrays",
    "fibonacci_memo",
    "fibonacci_table",
]


def three_sum_closest(nums: Iterable[int], target: int) -> int:
    """Return the sum of three elements closest to ``target``.

    Raises ValueError when fewer than three numbers are given.
    """
    items = sorted(nums)
    if len(items) < 3:
        raise ValueError("need at least three numbers")
    best = None
    best_distance = None
    for i, first in enumerate(items):
        low, high = i + 1, len(items) - 1
        while low < high:
            total = first + items[low] + items[high]
            distance = abs(target - total)
            if best_distance is None or distance < best_distance:
                best, best_distance = total, distance
            if total > target:
                high -= 1
            else:
                low += 1
    return best


def increasing_triplet(nums: Iterable[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[j] < nums[k]."""
    first = second = None
    for value in nums:
        if first is None or value <= first:
            first = value
        elif second is None or value <= second:
            second = value
        else:
            return True
    return False


def count_monotonic_subarrays(values: Sequence[int]) -> int:
    """Count the subarrays that are strictly increasing, strictly decreasing,
    or strictly decreasing and then strictly increasing."""
    n = len(values)
    if n == 0:
        return 0
    increasing = [1] * n
    decreasing = [1] * n
    for i in range(n - 2, -1, -1):
        if values[i] > values[i + 1]:
            decreasing[i] = decreasing[i + 1] + 1
        if values[i] < values[i + 1]:
            increasing[i] = increasing[i + 1] + 1

    total = 0
    for i, (inc, dec) in enumerate(zip(increasing, decreasing)):
        if inc > 1:
            total += inc
        elif dec > 1:
            total += dec
            valley = i + dec
            if valley < n:
                total += increasing[valley]
        else:
            total += 1
    return total


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number, memoising recursive calls.

    Any n <= 1 is returned unchanged.
    """
    memo: dict[int, int] = {}

    def fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def fibonacci_table(n: int) -> int:
    """Return the n-th Fibonacci number, filling a table bottom-up."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [0, 1]
    for k in range(2, n + 1):
        table.append(table[k - 1] + table[k - 2])
    return table[n]