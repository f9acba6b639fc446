"""Dynamic-programming solutions to classic optimisation problems."""

from __future__ import annotations

from collections.abc import Sequence

_MOD = 10**9 + 7


def _check_same_length(weights: Sequence[int], values: Sequence[int]) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if impossible.

    Every coin may be used any number of times.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount == 0:
        return 0
    unreachable = float("inf")
    best: list[float] = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            candidate = best[total - coin] + 1
            if candidate < best[total]:
                best[total] = candidate
    result = best[amount]
    return -1 if result == unreachable else int(result)


def cherry_pickup(grid: Sequence[Sequence[int]]) -> int:
    """Return the most cherries two robots collect walking down ``grid``.

    One robot starts in the top-left cell, the other in the top-right cell.
    Each step moves both one row down and at most one column sideways; a
    cell visited by both robots at once is counted once.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")

    def gain(row: Sequence[int], a: int, b: int) -> int:
        return row[a] if a == b else row[a] + row[b]

    unreached = -1
    best = [[unreached] * width for _ in range(width)]
    best[0][width - 1] = gain(grid[0], 0, width - 1)

    for row in grid[1:]:
        current = [[unreached] * width for _ in range(width)]
        for a in range(width):
            for b in range(width):
                previous = max(
                    best[pa][pb]
                    for pa in range(max(a - 1, 0), min(a + 2, width))
                    for pb in range(max(b - 1, 0), min(b + 2, width))
                )
                if previous != unreached:
                    current[a][b] = gain(row, a, b) + previous
        best = current

    return max(0, max(max(row) for row in best))


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Return the largest sum of elements of which no two are adjacent.

    At least one element is always taken.
    """
    if not values:
        raise ValueError("max_non_adjacent_sum() of an empty sequence")
    if len(values) == 1:
        return values[0]
    before, last = values[0], max(values[0], values[1])
    for value in values[2:]:
        before, last = last, max(value + before, last)
    return last


def count_subsets_with_sum(values: Sequence[int], target: int) -> int:
    """Count the subsets of non-negative ``values`` summing to ``target``.

    Zero elements give distinct subsets. The count is taken modulo 10**9 + 7.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    ways = [1] + [0] * target
    for value in values:
        ways = [
            (ways[total] + (ways[total - value] if total >= value else 0)) % _MOD
            for total in range(target + 1)
        ]
    return ways[target]


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items fitting in ``capacity``.

    Each item may be taken at most once.
    """
    _check_same_length(weights, values)
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        best = [
            max(best[room], value + best[room - weight]) if weight <= room else best[room]
            for room in range(capacity + 1)
        ]
    return best[capacity]


def unbounded_knapsack(
    capacity: int, values: Sequence[int], weights: Sequence[int]
) -> int:
    """Return the best total value in ``capacity`` with unlimited copies."""
    _check_same_length(weights, values)
    _check_capacity(capacity)
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def cut_rod(prices: Sequence[int]) -> int:
    """Return the best price for a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    length = len(prices)
    return unbounded_knapsack(length, prices, range(1, length + 1))