"""Comparison sorts: bubble, insertion, selection, merge, hybrid merge and quick sort."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_THRESHOLD = 25


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _insertion_sort_range(items: list[int], low: int, high: int) -> None:
    """Sort items[low..high] (inclusive) in place by insertion."""
    for i in range(low + 1, high + 1):
        item = items[i]
        j = i - 1
        while j >= low and items[j] > item:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = item


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by insertion."""
    items = list(values)
    _insertion_sort_range(items, 0, len(items) - 1)
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by selecting each minimum in turn."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(items: list[int], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs items[low..mid] and items[mid+1..high] in place."""
    left = items[low : mid + 1]
    right = items[mid + 1 : high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            items[k] = left[i]
            i += 1
        else:
            items[k] = right[j]
            j += 1
        k += 1
    rest = left[i:] + right[j:]
    items[k : k + len(rest)] = rest


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by top-down merge sort."""
    items = list(values)

    def sort(low: int, high: int) -> None:
        if low < high:
            mid = low + (high - low) // 2
            sort(low, mid)
            sort(mid + 1, high)
            _merge(items, low, mid, high)

    sort(0, len(items) - 1)
    return items


def merge_insertion_sort(
    values: Iterable[int], threshold: int = DEFAULT_THRESHOLD
) -> list[int]:
    """Merge sort that hands runs of at most threshold items to insertion sort."""
    if threshold < 0:
        raise ValueError("threshold cannot be negative")
    items = list(values)

    def sort(low: int, high: int) -> None:
        if low < high:
            if high - low + 1 <= threshold:
                _insertion_sort_range(items, low, high)
                return
            mid = (low + high) // 2
            sort(low, mid)
            sort(mid + 1, high)
            _merge(items, low, mid, high)

    sort(0, len(items) - 1)
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    """Partition items[low..high] around items[low]; return the pivot's final index."""
    pivot_pos = low
    low += 1
    while low <= high:
        if items[low] <= items[pivot_pos]:
            low += 1
        elif items[high] > items[pivot_pos]:
            high -= 1
        else:
            items[low], items[high] = items[high], items[low]
    items[high], items[pivot_pos] = items[pivot_pos], items[high]
    return high


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by quick sort with the first item as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items