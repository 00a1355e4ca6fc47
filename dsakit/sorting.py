"""Classic comparison and counting sorts.

Every function takes any iterable and returns a new sorted list, or a new
string for ``count_sort``. The input is never modified.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "count_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "sort_012",
    "wave_sort",
]

_CHAR_RANGE = 255


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def count_sort(text: str) -> str:
    """Sort the characters of ``text`` by counting occurrences of each code.

    Only characters with code points up to 255 are accepted.
    """
    counts = Counter(text)
    too_wide = [ch for ch in counts if ord(ch) > _CHAR_RANGE]
    if too_wide:
        raise ValueError(f"character {too_wide[0]!r} is outside the range 0..{_CHAR_RANGE}")
    return "".join(ch * counts[ch] for ch in sorted(counts, key=ord))


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable divide-and-conquer sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition ``items[low..high]`` around its first element; return the pivot's index."""
    pivot = items[low]
    i, j = low + 1, high
    while True:
        while i <= high and items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            break
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort using the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence made only of 0, 1 and 2 by counting each value."""
    counts = Counter(values)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"only 0, 1 and 2 are allowed, got {sorted(unexpected)!r}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def wave_sort(values: Iterable[Any]) -> list[Any]:
    """Arrange values so that a[0] >= a[1] <= a[2] >= a[3] <= ..."""
    items = sorted(values)
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]
    return items