"""Fixed and variable size sliding-window algorithms."""

from __future__ import annotations

from collections.abc import Sequence


def max_window_sum(nums: Sequence[int], k: int) -> int:
    """Return the largest sum of ``k`` consecutive elements.

    The result starts from 0, so it is 0 when ``nums`` has fewer than ``k``
    elements or every window sum is negative.
    """
    if k <= 0:
        raise ValueError("window size must be positive")
    best = 0
    total = 0
    for j, value in enumerate(nums):
        total += value
        if j >= k:
            total -= nums[j - k]
        if j >= k - 1:
            best = max(best, total)
    return best


def longest_subarray_with_sum(nums: Sequence[int], target: int) -> int:
    """Return the length of the longest run of non-negative ``nums`` summing to ``target``.

    Returns 0 when no such run exists.
    """
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    best = 0
    start = 0
    total = 0
    for end, value in enumerate(nums):
        total += value
        while start <= end and total > target:
            total -= nums[start]
            start += 1
        if total == target:
            best = max(best, end - start + 1)
    return best