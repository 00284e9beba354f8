"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front."""
    values = list(items)
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with Lomuto partitioning around the last element."""
    values = list(items)
    ranges = [(0, len(values) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot_index = _partition(values, low, high)
            ranges.append((pivot_index + 1, high))
            ranges.append((low, pivot_index - 1))
    return values