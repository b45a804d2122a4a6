"""Bit counting and subset enumeration with bit masks."""

from __future__ import annotations

from collections.abc import Sequence


def sum_bits(n: int) -> int:
    """Number of set bits in n; zero for n <= 0."""
    total = 0
    while n > 0:
        total += n & 1
        n >>= 1
    return total


def subset_sums(values: Sequence[int]) -> list[int]:
    """Sum of each subset, indexed by the bit mask that selects it."""
    return [
        sum(value for bit, value in enumerate(values) if mask & (1 << bit))
        for mask in range(1 << len(values))
    ]


def subsets_reaching(values: Sequence[int], target: int) -> list[tuple[int, ...]]:
    """Subsets of values, in mask order, whose sum equals target."""
    return [
        tuple(value for bit, value in enumerate(values) if mask & (1 << bit))
        for mask, total in enumerate(subset_sums(values))
        if total == target
    ]