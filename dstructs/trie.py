"""A trie of lower-case words."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from string import ascii_lowercase
from typing import Optional, Union


@dataclass
class _Node:
    is_word: bool = False
    children: dict[str, "_Node"] = field(default_factory=dict)


def _is_valid(word: str) -> bool:
    return all(ch in ascii_lowercase for ch in word)


class Trie:
    """Set of words made of the letters a to z."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        if not _is_valid(word):
            raise ValueError(f"word must contain only letters a-z: {word!r}")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_word = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not _is_valid(word):
            return False
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_word

    def remove(self, word: str) -> bool:
        """Remove word and prune branches left empty; return whether it was present."""
        if not _is_valid(word):
            return False
        present = word in self

        def prune(node: Optional[_Node], depth: int) -> Optional[_Node]:
            if node is None:
                return None
            if depth == len(word):
                node.is_word = False
                return None if not node.children else node
            ch = word[depth]
            child = prune(node.children.get(ch), depth + 1)
            if child is None:
                node.children.pop(ch, None)
            else:
                node.children[ch] = child
            if not node.children and not node.is_word:
                return None
            return node

        self._root = prune(self._root, 0) or _Node()
        return present

    def is_empty(self) -> bool:
        """True when the root has no children."""
        return not self._root.children

    def __iter__(self) -> Iterator[str]:
        """Words in alphabetical order."""

        def walk(node: _Node, prefix: str) -> Iterator[str]:
            if node.is_word:
                yield prefix
            for ch in sorted(node.children):
                yield from walk(node.children[ch], prefix + ch)

        return walk(self._root, "")

    def __len__(self) -> int:
        return sum(1 for _ in self)


def load_trie(path: Union[str, PathLike]) -> Trie:
    """Build a Trie from a file holding a word count followed by the words."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError("dictionary file is empty")
    try:
        count = int(tokens[0])
    except ValueError:
        raise ValueError(f"expected a word count, got {tokens[0]!r}") from None
    words = tokens[1 : 1 + count]
    if len(words) < count:
        raise ValueError(f"expected {count} words, found {len(words)}")
    return Trie(words)