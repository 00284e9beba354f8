"""Simple records, a linked chain of nodes and small text-file helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any


@dataclass
class Student:
    """A student's name, roll number and marks."""

    name: str
    roll: int
    marks: float

    @classmethod
    def parse(cls, text: str) -> Student:
        """Build a student from "name roll marks" separated by whitespace."""
        fields = text.split()
        if len(fields) != 3:
            raise ValueError(f"expected name, roll and marks, got {text!r}")
        name, roll, marks = fields
        try:
            return cls(name, int(roll), float(marks))
        except ValueError as exc:
            raise ValueError(f"invalid student record {text!r}") from exc

    def describe(self) -> str:
        """Return a one-line description of the student."""
        return f"Name: {self.name}, Roll No: {self.roll}, Marks: {self.marks:.2f}"


@dataclass
class Node:
    """A node in a singly linked chain."""

    data: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def link(values: Iterable[Any]) -> Node | None:
    """Chain ``values`` into nodes and return the head, or None if empty."""
    head: Node | None = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def swap(a: Any, b: Any) -> tuple[Any, Any]:
    """Return the two values in exchanged order."""
    return b, a


def offset_values(items: Sequence[Any], count: int) -> list[Any]:
    """Return the values at offsets 0 .. count-1 from the start of ``items``."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count > len(items):
        raise IndexError(f"offset {count - 1} is beyond {len(items)} items")
    return list(items[:count])


def write_profile(path: str | PathLike[str], name: str, age: int) -> None:
    """Write a name and age to ``path`` as two labelled lines."""
    if not name or any(ch.isspace() for ch in name):
        raise ValueError(f"name must be a single non-empty word, got {name!r}")
    Path(path).write_text(f"Name: {name}\nAge: {int(age)}\n", encoding="utf-8")


def read_token_pairs(path: str | PathLike[str]) -> list[tuple[str, str]]:
    """Read whitespace-separated tokens from ``path`` two at a time.

    A trailing unpaired token is paired with the previous second token,
    or with an empty string when there is none.
    """
    tokens = Path(path).read_text(encoding="utf-8").split()
    pairs: list[tuple[str, str]] = []
    second = ""
    for start in range(0, len(tokens), 2):
        first = tokens[start]
        if start + 1 < len(tokens):
            second = tokens[start + 1]
        pairs.append((first, second))
    return pairs