"""Binary search and problems solved by searching on the answer."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Callable, Sequence


def max_valid_answer(predicate: Callable[[int], bool], high: int) -> int:
    """Return the largest value in ``[0, high]`` for which ``predicate`` holds.

    ``predicate`` must be true up to some point and false after it. Returns
    0 when it holds nowhere.
    """
    low, answer = 0, 0
    while low <= high:
        mid = low + (high - low) // 2
        if predicate(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def binary_search(nums: Sequence[int], x: int) -> int:
    """Return an index of ``x`` in sorted ``nums``, or -1 if it is absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == x:
            return mid
        if nums[mid] > x:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Adjacent elements must differ. Returns -1 if the search finds no peak.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("find_peak_element() of an empty sequence")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[n - 1] > nums[n - 2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid - 1] < nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_sorted_matrix(matrix: Sequence[Sequence[int]], x: int) -> bool:
    """Tell whether ``x`` is in a matrix whose rows and columns are sorted."""
    if not matrix:
        return False
    rows, cols = len(matrix), len(matrix[0])
    i, j = 0, cols - 1
    while i < rows and j >= 0:
        value = matrix[i][j]
        if value == x:
            return True
        if value > x:
            j -= 1
        else:
            i += 1
    return False


def _fits(limit: int, pages: Sequence[int], students: int) -> bool:
    used, current = 1, 0
    for count in pages:
        current += count
        if current > limit:
            current = count
            used += 1
            if used > students:
                return False
    return True


def find_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any student reads.

    Books are handed out in order, each student taking a contiguous run.
    Returns -1 when there are more students than books.
    """
    if students < 1:
        raise ValueError("students must be at least 1")
    if students > len(pages):
        return -1
    low, high = max(pages), sum(pages)
    answer = high
    while low <= high:
        mid = low + (high - low) // 2
        if _fits(mid, pages, students):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def median_of_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    size1, size2 = len(nums1), len(nums2)
    total = size1 + size2
    if total == 0:
        raise ValueError("median of two empty sequences")
    left_size = (total + 1) // 2
    low, high = 0, size1
    while low <= high:
        take1 = low + (high - low) // 2
        take2 = left_size - take1
        left1 = nums1[take1 - 1] if take1 > 0 else -math.inf
        left2 = nums2[take2 - 1] if take2 > 0 else -math.inf
        right1 = nums1[take1] if take1 < size1 else math.inf
        right2 = nums2[take2] if take2 < size2 else math.inf
        if left1 <= right2 and left2 <= right1:
            if total % 2:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2.0
        if left1 > right2:
            high = take1 - 1
        else:
            low = take1 + 1
    raise ValueError("input sequences must be sorted")