"""Sorting algorithms and related array transforms.

Every function returns a new list and leaves its argument untouched.
"""

from collections.abc import Iterable

__all__ = [
    "counting_sort",
    "dutch_flag_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "wave_sort",
    "rank_transform",
]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    # Turn counts into end positions.
    running = 0
    for value, count in enumerate(counts):
        running += count
        counts[value] = running
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass.

    Values other than 0 and 1 are moved to the end, as 2s are.
    """
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _sift_down(items: list, root: int, size: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[largest] < items[left]:
            largest = left
        if right < size and items[largest] < items[right]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort ascending with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Sort ascending by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Sort ascending with Lomuto-partition quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def wave_sort(values: Iterable) -> list:
    """Rearrange so that items[0] >= items[1] <= items[2] >= items[3] ..."""
    items = list(values)
    size = len(items)
    for i in range(1, size, 2):
        if items[i] > items[i - 1]:
            items[i], items[i - 1] = items[i - 1], items[i]
        if i + 1 < size and items[i] > items[i + 1]:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def rank_transform(values: Iterable) -> list[int]:
    """Replace every value by its position in sorted order (0-based).

    Equal values are ranked by their original position.
    """
    items = list(values)
    ranks = [0] * len(items)
    order = sorted((value, index) for index, value in enumerate(items))
    for rank, (_, index) in enumerate(order):
        ranks[index] = rank
    return ranks