import pytest

from dsakit.windows import longest_subarray_with_sum, max_window_sum

NUMS = [1, 3, 4, 5, 6, 9]


def test_max_window_sum_source_example():
    assert max_window_sum(NUMS, 3) == 20


@pytest.mark.parametrize("k", [1, 2, 3, 4, 6])
def test_max_window_sum_is_max_over_windows(k):
    result = max_window_sum(NUMS, k)
    windows = [NUMS[i : i + k] for i in range(len(NUMS) - k + 1)]
    assert all(sum(window) <= result for window in windows)
    assert any(sum(window) == result for window in windows)


def test_max_window_sum_whole_list():
    assert max_window_sum(NUMS, len(NUMS)) == sum(NUMS)


def test_max_window_sum_too_short_is_zero():
    assert max_window_sum([5, 6], 3) == 0


def test_max_window_sum_bad_k():
    with pytest.raises(ValueError):
        max_window_sum(NUMS, 0)


@pytest.mark.parametrize(
    "nums,target",
    [([1, 2, 3, 4], 6), ([2, 0, 0, 2, 5], 4), ([1, 1, 1, 1], 2), (NUMS, 9)],
)
def test_longest_subarray_with_sum_invariants(nums, target):
    length = longest_subarray_with_sum(nums, target)
    assert length > 0
    starts = range(len(nums) - length + 1)
    assert any(sum(nums[i : i + length]) == target for i in starts)
    for longer in range(length + 1, len(nums) + 1):
        assert all(
            sum(nums[i : i + longer]) != target for i in range(len(nums) - longer + 1)
        )


def test_longest_subarray_with_sum_none():
    assert longest_subarray_with_sum(NUMS, 10) == 0


def test_longest_subarray_with_sum_whole_list():
    assert longest_subarray_with_sum(NUMS, sum(NUMS)) == len(NUMS)


def test_longest_subarray_rejects_negative():
    with pytest.raises(ValueError):
        longest_subarray_with_sum([1, -1, 2], 2)