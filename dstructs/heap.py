"""Array-backed binary min-heap, heap sort and heap-property checks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class MinHeap:
    """Binary min-heap of integers stored level by level in a list."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)
        for index in reversed(range(len(self._items) // 2)):
            self._percolate_down(index)

    def _percolate_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            if right < size:
                child = left if items[left] < items[right] else right
            elif left < size:
                child = left
            else:
                return
            if items[index] <= items[child]:
                return
            items[index], items[child] = items[child], items[index]
            index = child

    def _percolate_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                return
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def push(self, value: int) -> None:
        """Add value to the heap."""
        self._items.append(value)
        self._percolate_up(len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the smallest value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        smallest = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._percolate_down(0)
        return smallest

    def peek(self) -> int:
        """The smallest value, left in place; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values in heap array order."""
        return iter(list(self._items))


def heapsort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a MinHeap."""
    heap = MinHeap(values)
    return [heap.pop() for _ in range(len(heap))]


def is_heap_recursive(values: Sequence[int], index: int = 0) -> bool:
    """Whether the subtree of values rooted at index satisfies the min-heap property."""
    size = len(values)
    left = 2 * index + 1
    right = left + 1
    if size <= 0 or left >= size:
        return True
    if values[left] < values[index]:
        return False
    if right < size and values[right] < values[index]:
        return False
    return is_heap_recursive(values, left) and is_heap_recursive(values, right)


def is_heap_iterative(values: Sequence[int]) -> bool:
    """Whether the whole sequence satisfies the min-heap property."""
    size = len(values)
    for index in range(size // 2):
        left = 2 * index + 1
        right = left + 1
        if values[left] < values[index]:
            return False
        if right < size and values[right] < values[index]:
            return False
    return True