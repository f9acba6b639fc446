"""Merge sort, quick sort and the Dutch national flag partition."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a new stably sorted list of ``arr``."""
    items = list(arr)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(arr: list[int], low: int, high: int) -> int:
    pivot = arr[low]
    i, j = low, high
    while i < j:
        while arr[i] <= pivot and i <= high - 1:
            i += 1
        while arr[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
    arr[low], arr[j] = arr[j], arr[low]
    return j


def quick_sort(arr: Sequence[int]) -> list[int]:
    """Return a new sorted list of ``arr`` using first-element pivots."""
    items = list(arr)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            mid += 1
            low += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1