"""Segment tree supporting point updates and range sums."""

from __future__ import annotations

from collections.abc import Sequence


class NumArray:
    """An integer array answering range-sum queries with point updates."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._n = len(nums)
        self._tree = [0] * (4 * self._n + 1)
        if self._n:
            self._build(list(nums), 0, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, val: int) -> None:
        """Set the element at ``index`` to ``val``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, 0, self._n - 1, index, val)

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of elements from ``left`` to ``right`` inclusive."""
        if not self._n:
            return 0
        return self._query(0, 0, self._n - 1, left, right)

    def _build(self, nums: list[int], pos: int, start: int, end: int) -> None:
        if start == end:
            self._tree[pos] = nums[start]
            return
        mid = (start + end) // 2
        self._build(nums, 2 * pos + 1, start, mid)
        self._build(nums, 2 * pos + 2, mid + 1, end)
        self._tree[pos] = self._tree[2 * pos + 1] + self._tree[2 * pos + 2]

    def _query(self, pos: int, start: int, end: int, left: int, right: int) -> int:
        if start >= left and end <= right:
            return self._tree[pos]
        if end < left or start > right:
            return 0
        mid = (start + end) // 2
        return self._query(2 * pos + 1, start, mid, left, right) + self._query(
            2 * pos + 2, mid + 1, end, left, right
        )

    def _update(self, pos: int, start: int, end: int, index: int, val: int) -> None:
        if start == end:
            self._tree[pos] = val
            return
        mid = (start + end) // 2
        if index <= mid:
            self._update(2 * pos + 1, start, mid, index, val)
        else:
            self._update(2 * pos + 2, mid + 1, end, index, val)
        self._tree[pos] = self._tree[2 * pos + 1] + self._tree[2 * pos + 2]