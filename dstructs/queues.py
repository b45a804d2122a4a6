"""FIFO queues: a growable circular array and a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

INIT_SIZE = 10


class CircularQueue:
    """Queue stored in a circular buffer that doubles when full."""

    def __init__(self, capacity: int = INIT_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._elements: list[Optional[int]] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def enqueue(self, value: int) -> None:
        """Add value at the back, growing the buffer when it is full."""
        size = len(self._elements)
        if self._count == size:
            # Unwrap: items before front move just past the old end.
            self._elements.extend([None] * size)
            for i in range(self._front):
                self._elements[i + size] = self._elements[i]
                self._elements[i] = None
            size *= 2
        self._elements[(self._front + self._count) % size] = value
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("dequeue from an empty queue")
        value = self._elements[self._front]
        self._elements[self._front] = None
        self._front = (self._front + 1) % len(self._elements)
        self._count -= 1
        return value  # type: ignore[return-value]

    def peek(self) -> int:
        """The front value, left in place; raise IndexError when empty."""
        if self._count == 0:
            raise IndexError("peek into an empty queue")
        return self._elements[self._front]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Values from front to back."""
        size = len(self._elements)
        snapshot = [self._elements[(self._front + i) % size] for i in range(self._count)]
        return iter(snapshot)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r})"


@dataclass(eq=False)
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedQueue:
    """Queue stored as a singly linked list with front and back pointers."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._count = 0

    def enqueue(self, value: int) -> None:
        """Add value at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the front value; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._count -= 1
        return node.data

    def peek(self) -> int:
        """The front value, left in place; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("peek into an empty queue")
        return self._front.data

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        """Values from front to back."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"