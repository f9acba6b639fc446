"""In-place array algorithms: gap merge, majority vote, next permutation."""

from __future__ import annotations

from collections.abc import Sequence


def merge_sorted_in_place(arr1: list[int], arr2: list[int]) -> None:
    """Merge two sorted lists without extra space.

    Afterwards ``arr1`` holds the smallest elements and ``arr2`` the rest,
    both sorted.
    """
    m = len(arr1)
    total = m + len(arr2)

    def locate(index: int) -> tuple[list[int], int]:
        return (arr1, index) if index < m else (arr2, index - m)

    gap = (total + 1) // 2
    while gap > 0:
        for left in range(total - gap):
            first, i = locate(left)
            second, j = locate(left + gap)
            if first[i] > second[j]:
                first[i], second[j] = second[j], first[i]
        if gap == 1:
            break
        gap = (gap + 1) // 2


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occurring more than half the time (Moore's vote)."""
    if not nums:
        raise ValueError("majority_element() of an empty sequence")
    candidate = nums[0]
    count = 0
    for value in nums:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate, count = value, 1
    return candidate


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps around to the first (ascending) one.
    """
    n = len(nums)
    i = n - 2
    while i >= 0 and nums[i] >= nums[i + 1]:
        i -= 1
    if i < 0:
        nums.reverse()
        return
    j = next(k for k in range(n - 1, i, -1) if nums[k] > nums[i])
    nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1 :] = reversed(nums[i + 1 :])