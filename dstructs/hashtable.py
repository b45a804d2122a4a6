"""Open-addressing hash tables: a word set and an integer map."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Optional, Union

TABLE_SIZE = 59999
DEFAULT_CAPACITY = 10


class Probing(Enum):
    """Collision resolution strategy for WordTable."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"


def hash_word(word: str, table_size: int = TABLE_SIZE) -> int:
    """Value of word in base 128 (by character code), reduced modulo table_size."""
    total = 0
    for ch in word:
        total = (128 * total + ord(ch)) % table_size
    return total


class WordTable:
    """Set of words stored by open addressing.

    Deleting a word empties its slot outright, so words that had probed past
    that slot may no longer be found afterwards.
    """

    def __init__(self, size: int = TABLE_SIZE, probing: Probing = Probing.LINEAR) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.probing = Probing(probing)
        self._slots: list[Optional[str]] = [None] * size

    def _probe(self, word: str) -> Iterator[int]:
        index = hash_word(word, self.size)
        yield index
        for step in range(1, self.size):
            if self.probing is Probing.LINEAR:
                index = (index + 1) % self.size
            else:
                index = (index + step * step) % self.size
            yield index

    def insert(self, word: str) -> None:
        """Place word in the first free slot along its probe sequence."""
        if not word:
            raise ValueError("cannot store an empty word")
        for index in self._probe(word):
            if self._slots[index] is None:
                self._slots[index] = word
                return
        raise OverflowError(f"no free slot for {word!r}")

    def _locate(self, word: str) -> Optional[int]:
        for index in self._probe(word):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == word:
                return index
        return None

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        return self._locate(word) is not None

    def discard(self, word: str) -> None:
        """Remove word if it is found; do nothing otherwise."""
        if not word:
            return
        index = self._locate(word)
        if index is not None:
            self._slots[index] = None

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def __iter__(self) -> Iterator[str]:
        return (slot for slot in self._slots if slot is not None)


def load_dictionary(
    path: Union[str, PathLike], probing: Probing = Probing.LINEAR
) -> WordTable:
    """Build a WordTable from a file holding a word count followed by the words."""
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
    table = WordTable(probing=probing)
    for word in words:
        table.insert(word)
    return table


_TOMBSTONE = object()


class IntHashMap:
    """Integer-keyed map using linear probing and tombstones for deletion."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[object] = [None] * capacity
        self._size = 0

    def insert(self, key: int, value: int) -> None:
        """Store value under key, replacing an entry for key met on the way."""
        index = key % self.capacity
        for _ in range(self.capacity):
            slot = self._slots[index]
            if slot is None or slot is _TOMBSTONE or slot[0] == key:  # type: ignore[index]
                break
            index = (index + 1) % self.capacity
        else:
            raise OverflowError("hash map is full")
        if slot is None or slot is _TOMBSTONE:
            self._size += 1
        self._slots[index] = (key, value)

    def _locate(self, key: int) -> Optional[int]:
        index = key % self.capacity
        for _ in range(self.capacity):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _TOMBSTONE and slot[0] == key:  # type: ignore[index]
                return index
            index = (index + 1) % self.capacity
        return None

    def delete(self, key: int) -> None:
        """Remove key; raise KeyError if it is not present."""
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = _TOMBSTONE
        self._size -= 1

    def get(self, key: int, default: Optional[int] = None) -> Optional[int]:
        index = self._locate(key)
        if index is None:
            return default
        return self._slots[index][1]  # type: ignore[index]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._locate(key) is not None

    def __len__(self) -> int:
        return self._size