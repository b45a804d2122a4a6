"""Binary search and intersection of sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def binary_search(items: Sequence[int], target: int) -> Optional[int]:
    """Index of target in the sorted sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(items: Sequence[int], target: int) -> Optional[int]:
    """Recursive form of binary_search."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(items) - 1)


def common_elements(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Values present in both sorted sequences, found by a single linear merge."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            i += 1
        elif second[j] < first[i]:
            j += 1
        else:
            result.append(first[i])
            i += 1
            j += 1
    return result


def common_by_search(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Values of first that a binary search finds in the sorted sequence second."""
    return [value for value in first if binary_search(second, value) is not None]