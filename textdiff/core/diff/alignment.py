"""
LCS alignment engine.

Computes the longest common subsequence of two key sequences with a
dynamic-programming table, then backtracks to an ordered list of
match/insert/delete actions.

Runs in O(m*n) time and memory. Callers comparing very large inputs
should guard the input size first, or pass a different function with
the same signature as `align` to `TextDiffEngine`.
"""

from __future__ import annotations

from typing import Callable, Sequence

from textdiff.core.models import Action


Aligner = Callable[[Sequence[str], Sequence[str]], list[Action]]


def build_lcs_table(keys_a: Sequence[str], keys_b: Sequence[str]) -> list[list[int]]:
    """
    Build the LCS length table.

    `table[i][j]` is the LCS length of `keys_a[:i]` and `keys_b[:j]`.
    """
    m, n = len(keys_a), len(keys_b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        key_a = keys_a[i - 1]
        previous = table[i - 1]
        current = table[i]
        for j in range(1, n + 1):
            if key_a == keys_b[j - 1]:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])

    return table


def align(keys_a: Sequence[str], keys_b: Sequence[str]) -> list[Action]:
    """
    Align two key sequences.

    Ties between an insertion and a deletion are broken in favour of
    the insertion, so equal inputs always produce the same actions.

    Returns:
        Actions in forward order. MATCH and DELETE consume `keys_a`,
        MATCH and INSERT consume `keys_b`.
    """
    table = build_lcs_table(keys_a, keys_b)
    actions: list[Action] = []

    i, j = len(keys_a), len(keys_b)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and keys_a[i - 1] == keys_b[j - 1]:
            actions.append(Action.MATCH)
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            actions.append(Action.INSERT)
            j -= 1
        else:
            actions.append(Action.DELETE)
            i -= 1

    # Backtracking walks from the end
    actions.reverse()
    return actions


def lcs_length(keys_a: Sequence[str], keys_b: Sequence[str]) -> int:
    """Length of the longest common subsequence."""
    return build_lcs_table(keys_a, keys_b)[-1][-1]
