"""Longest Common Subsequence matching over item keys.

Uses the standard dynamic-programming LCS algorithm to find the longest
sequence of keys that kept their relative order between two versions of a
collection.  The positional differ uses the result to tell items that
were genuinely moved from items that only shifted because something was
inserted or removed around them.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence


def lcs_match(
    before: Sequence[Hashable],
    after: Sequence[Hashable],
) -> list[tuple[int, int]]:
    """Compute LCS-based matched pairs between two key sequences.

    Parameters
    ----------
    before:
        Keys in their order before the change.
    after:
        Keys in their order after the change.

    Returns
    -------
    list[tuple[int, int]]
        ``(before_idx, after_idx)`` pairs of matched keys, in order.  When
        several subsequences of maximal length exist, the backtrack drops
        items from *before* first, which keeps the earliest candidates of
        *before* in the match.
    """
    m = len(before)
    n = len(after)

    if m == 0 or n == 0:
        return []

    # dp[i][j] is the length of the LCS of before[:i] and after[:j].
    dp: list[list[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if before[i - 1] == after[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    pairs: list[tuple[int, int]] = []
    i, j = m, n
    while i > 0 and j > 0:
        if before[i - 1] == after[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs


def stable_keys(
    before: Sequence[Hashable],
    after: Sequence[Hashable],
) -> set[Hashable]:
    """Return the keys of the longest common subsequence of *before* and *after*."""
    return {before[i] for i, _ in lcs_match(before, after)}
