"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A single tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _c_mod(a: int, b: int) -> int:
    """Remainder that truncates toward zero, as integer division in C does."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class BinarySearchTree:
    """Binary search tree; equal values go to the left subtree when allowed."""

    def __init__(self, values: Iterable[int] = (), allow_duplicates: bool = True) -> None:
        self._root: Optional[Node] = None
        self._size = 0
        self.allow_duplicates = allow_duplicates
        for value in values:
            self.insert(value)

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, value: int) -> bool:
        """Insert value; return False if it was a rejected duplicate."""
        new = Node(value)
        if self._root is None:
            self._root = new
            self._size += 1
            return True
        node = self._root
        while True:
            if value > node.data:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
            else:
                if value == node.data and not self.allow_duplicates:
                    return False
                if node.left is None:
                    node.left = new
                    break
                node = node.left
        self._size += 1
        return True

    def _find(self, value: int) -> tuple[Optional[Node], Optional[Node]]:
        parent, node = None, self._root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        return parent, node

    def delete(self, value: int) -> None:
        """Remove one occurrence of value; raise KeyError if absent."""
        parent, node = self._find(value)
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.data = succ.data
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self._find(value)[1] is not None

    def __iter__(self) -> Iterator[int]:
        stack: list[Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def total(self) -> int:
        """Sum of all stored values."""
        return sum(self)

    def minimum(self) -> int:
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def maximum(self) -> int:
        if self._root is None:
            raise ValueError("maximum of an empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.data

    def parent(self, value: int) -> Optional[Node]:
        """Parent node of the node holding value; None for the root or a missing value."""
        parent, node = self._find(value)
        return parent if node is not None else None

    @staticmethod
    def _count(node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + BinarySearchTree._count(node.left) + BinarySearchTree._count(node.right)

    def kth_smallest(self, k: int) -> int:
        """The k-th smallest value, counting from 1."""
        if not 1 <= k <= self._size:
            raise IndexError(f"rank {k} out of range 1..{self._size}")
        node = self._root
        while node is not None:
            left_count = self._count(node.left)
            if left_count >= k:
                node = node.left
            elif left_count == k - 1:
                return node.data
            else:
                k -= left_count + 1
                node = node.right
        raise IndexError(k)

    def first_greater(self, x: int) -> Optional[int]:
        """Smallest stored value strictly greater than x, or None."""
        best: Optional[int] = None
        node = self._root
        while node is not None:
            if node.data > x:
                best = node.data
                node = node.left
            else:
                node = node.right
        return best

    def what(self, val: int) -> list[int]:
        """Walk one path from the root and collect data + val where data > val.

        At each node the walk goes left with val + 3 when data mod val exceeds 5,
        otherwise right with val + 4.
        """
        out: list[int] = []
        node = self._root
        while node is not None:
            if node.data > val:
                out.append(node.data + val)
            if _c_mod(node.data, val) > 5:
                node, val = node.left, val + 3
            else:
                node, val = node.right, val + 4
        return out