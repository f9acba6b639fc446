"""Longest common subsequence and related string problems."""

from __future__ import annotations

from functools import lru_cache


def _lcs_table(a: str, b: str) -> list[list[int]]:
    """Return ``table`` where ``table[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, char_a in enumerate(a, start=1):
        row, above = table[i], table[i - 1]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def longest_common_subsequence(a: str, b: str) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def longest_common_substring(a: str, b: str) -> int:
    """Return the length of the longest common contiguous substring."""
    best = 0
    previous = [0] * len(b)
    for char_a in a:
        current = [0] * len(b)
        for j, char_b in enumerate(b):
            if char_a == char_b:
                current[j] = 1 + (previous[j - 1] if j else 0)
                best = max(best, current[j])
        previous = current
    return best


def all_longest_common_subsequences(s: str, t: str) -> list[str]:
    """Return every distinct longest common subsequence, sorted.

    When the strings share no character the only such subsequence is ``""``.
    """
    n, m = len(s), len(t)
    # suffix[i][j] is the LCS length of s[i:] and t[j:]
    suffix = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if s[i] == t[j]:
                suffix[i][j] = 1 + suffix[i + 1][j + 1]
            else:
                suffix[i][j] = max(suffix[i + 1][j], suffix[i][j + 1])

    @lru_cache(maxsize=None)
    def collect(i: int, j: int) -> frozenset[str]:
        if i == n or j == m:
            return frozenset({""})
        if s[i] == t[j]:
            return frozenset(s[i] + rest for rest in collect(i + 1, j + 1))
        found: set[str] = set()
        if suffix[i + 1][j] == suffix[i][j]:
            found |= collect(i + 1, j)
        if suffix[i][j + 1] == suffix[i][j]:
            found |= collect(i, j + 1)
        return frozenset(found)

    return sorted(collect(0, 0))


def shortest_common_supersequence(a: str, b: str) -> str:
    """Return a shortest string having both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    reversed_chars: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            reversed_chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            reversed_chars.append(a[i - 1])
            i -= 1
        else:
            reversed_chars.append(b[j - 1])
            j -= 1
    reversed_chars.extend(reversed(a[:i]))
    reversed_chars.extend(reversed(b[:j]))
    return "".join(reversed(reversed_chars))


def num_distinct(s: str, t: str) -> int:
    """Count the ways ``t`` occurs in ``s`` as a subsequence."""
    ways = [1] + [0] * len(t)
    for char in s:
        for j in range(len(t), 0, -1):
            if t[j - 1] == char:
                ways[j] += ways[j - 1]
    return ways[len(t)]