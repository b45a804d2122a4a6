"""Student grade records, employee records and jagged random arrays."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """A student with three grades."""

    student_id: int
    g1: int
    g2: int
    g3: int

    @property
    def average(self) -> float:
        return (self.g1 + self.g2 + self.g3) / 3.0

    def __str__(self) -> str:
        return f"{self.student_id} {self.g1} {self.g2} {self.g3} {self.average:.2f}"


@dataclass(frozen=True)
class Employee:
    name: str
    salary: float


def parse_students(text: str) -> list[Student]:
    """Parse a count followed by that many lines of: id g1 g2 g3."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no student count given")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"expected integers: {exc}") from None
    count, fields = numbers[0], numbers[1:]
    if count < 0:
        raise ValueError("student count cannot be negative")
    if len(fields) < 4 * count:
        raise ValueError(f"expected {count} students, data ends early")
    return [Student(*fields[4 * i : 4 * i + 4]) for i in range(count)]


def max_average_student(students: Sequence[Student]) -> Student:
    """The first student whose average is highest and above 1; else the first student."""
    if not students:
        raise ValueError("no students given")
    best, best_average = students[0], 1.0
    for student in students:
        if student.average > best_average:
            best, best_average = student, student.average
    return best


def create_employees(names: Iterable[str], salaries: Iterable[float]) -> list[Employee]:
    """Pair each name with its salary."""
    try:
        return [Employee(name, float(salary)) for name, salary in zip(names, salaries, strict=True)]
    except ValueError as exc:
        raise ValueError(f"names and salaries differ in length: {exc}") from None


def random_jagged(
    lengths: Iterable[int], rng: Optional[random.Random] = None
) -> list[list[int]]:
    """Rows of random values in 0..99, row i holding lengths[i] items."""
    rng = rng or random.Random()
    rows = []
    for length in lengths:
        if length < 0:
            raise ValueError("row length cannot be negative")
        rows.append([rng.randrange(100) for _ in range(length)])
    return rows