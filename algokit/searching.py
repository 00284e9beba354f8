"""Searching helpers and a palindrome check."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first occurrence of ``key``, or None."""
    return next((index for index, value in enumerate(items) if value == key), None)


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same backwards (case-sensitive)."""
    return text == text[::-1]