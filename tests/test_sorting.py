import random

import pytest

from dsakit.sorting import merge_sort, quick_sort, sort_colors


SAMPLE = [4, 2, 1, 3, 5, 6, 11, 8, 9, 10]


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_sample_array(sorter):
    assert sorter(SAMPLE) == sorted(SAMPLE)


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_input_is_left_untouched(sorter):
    data = list(SAMPLE)
    sorter(data)
    assert data == SAMPLE


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
@pytest.mark.parametrize("size", [0, 1, 2, 17, 200])
def test_random_arrays(sorter, size):
    rng = random.Random(size)
    data = [rng.randint(-20, 20) for _ in range(size)]
    assert sorter(data) == sorted(data)


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort])
def test_all_equal_and_reversed(sorter):
    assert sorter([5] * 10) == [5] * 10
    assert sorter(list(range(30, 0, -1))) == list(range(1, 31))


def test_sort_colors_walkthrough():
    nums = [1, 0, 2, 2, 1, 0]
    assert sort_colors(nums) is None
    assert nums == sorted([1, 0, 2, 2, 1, 0])


@pytest.mark.parametrize("seed", range(5))
def test_sort_colors_random(seed):
    rng = random.Random(seed)
    nums = [rng.choice([0, 1, 2]) for _ in range(50)]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_empty():
    nums = []
    sort_colors(nums)
    assert nums == []