"""Singly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list holding values in the order given."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, value: int) -> None:
        """Put value at the head of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        reversed_head: Optional[_Node] = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = reversed_head
            reversed_head = node
            node = following
        self._head = reversed_head

    def insert_at(self, value: int, place: int) -> None:
        """Insert value so that it becomes the place-th item (counting from 1).

        Place must be at least 2 and the list must already hold place - 1 items;
        otherwise IndexError is raised and the list is left unchanged.
        """
        if self._head is None:
            raise IndexError("the list is empty, and place is out of bounds")
        if place < 2:
            raise IndexError("place must be at least 2")
        current: Optional[_Node] = self._head
        for _ in range(place - 2):
            if current is None:
                break
            current = current.next
        if current is None:
            raise IndexError("the place is out of bounds")
        current.next = _Node(value, current.next)
        self._size += 1

    def insert_after_fours(self) -> None:
        """Insert a 2 directly after every node holding 4."""
        node = self._head
        while node is not None:
            if node.data == 4:
                node.next = _Node(2, node.next)
                self._size += 1
                node = node.next
            node = node.next

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"