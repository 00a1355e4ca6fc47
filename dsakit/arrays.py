"""Small algorithms over lists of numbers."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence
from math import prod
from typing import Any

__all__ = [
    "binary_search",
    "first_non_repeating",
    "largest_row_sum",
    "leaders",
    "max_subarray_sum",
    "most_frequent",
    "move_zeros_to_end",
    "product_except_self",
    "reverse_copy",
    "reverse_in_place",
    "subarray_with_sum",
]


def first_non_repeating(values: Iterable[Any]) -> Any | None:
    """Return the first element that occurs exactly once, or None if there is none."""
    items = list(values)
    counts = Counter(items)
    return next((item for item in items if counts[item] == 1), None)


def most_frequent(values: Iterable[Any]) -> Any:
    """Return the most frequent element; ties go to the smallest value."""
    counts = Counter(values)
    if not counts:
        raise ValueError("most_frequent() of an empty sequence")
    top = max(counts.values())
    return min(value for value, count in counts.items() if count == top)


def reverse_copy(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding the elements in reverse order."""
    return list(values)[::-1]


def reverse_in_place(values: list[Any]) -> None:
    """Reverse a list in place by swapping elements from both ends."""
    n = len(values)
    for i in range(n // 2):
        values[i], values[n - i - 1] = values[n - i - 1], values[i]


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``values``, or -1 if absent."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return -1


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def largest_row_sum(matrix: Iterable[Iterable[int]]) -> tuple[int, int]:
    """Return ``(sum, row_index)`` of the row with the largest sum; the first wins ties."""
    best: tuple[int, int] | None = None
    for index, row in enumerate(matrix):
        total = sum(row)
        if best is None or total > best[0]:
            best = (total, index)
    if best is None:
        raise ValueError("largest_row_sum() of an empty matrix")
    return best


def leaders(values: Sequence[Any]) -> list[Any]:
    """Return the elements greater than everything to their right, rightmost first."""
    found: list[Any] = []
    for value in reversed(values):
        if not found or value > found[-1]:
            found.append(value)
    return found


def move_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Return the elements with every zero moved to the end, order otherwise kept."""
    items = list(values)
    non_zero = [value for value in items if value != 0]
    return non_zero + [0] * (len(items) - len(non_zero))


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other elements.

    A single-element input yields ``[0]``.
    """
    if len(values) == 1:
        return [0]
    products: list[int] = []
    running = 1
    for value in values:
        products.append(running)
        running *= value
    running = 1
    for i in range(len(values) - 1, -1, -1):
        products[i] *= running
        running *= values[i]
    return products


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find the first contiguous run of non-negative ``values`` summing to ``target``.

    Returns 1-based inclusive ``(start, end)`` positions, or None if no run matches.
    """
    if target < 0:
        raise ValueError("target must be non-negative")
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")
    total = 0
    start = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start <= end:
            total -= values[start]
            start += 1
        if total == target and start <= end:
            return start + 1, end + 1
    return None