"""Tests for the LCS alignment engine."""

from __future__ import annotations

from textdiff.core.diff.alignment import align, build_lcs_table, lcs_length
from textdiff.core.models import Action

M, I, D = Action.MATCH, Action.INSERT, Action.DELETE


def test_empty_sequences() -> None:
    assert align([], []) == []


def test_one_side_empty() -> None:
    assert align([], ["a", "b"]) == [I, I]
    assert align(["a", "b"], []) == [D, D]


def test_identical_sequences_match() -> None:
    assert align(["a", "b", "c"], ["a", "b", "c"]) == [M, M, M]


def test_substitution_deletes_before_inserting() -> None:
    assert align(["a", "b", "c"], ["a", "x", "c"]) == [M, D, I, M]


def test_tie_prefers_insert_when_backtracking() -> None:
    # Backtracking from the end emits the insert first, so in forward
    # order the delete comes before it.
    assert align(["a"], ["b"]) == [D, I]
    assert align(["a", "b"], ["b", "a"]) == [D, M, I]


def test_action_counts_consume_both_sides() -> None:
    keys_a = list("abcbdab")
    keys_b = list("bdcaba")
    actions = align(keys_a, keys_b)
    matches = actions.count(M)
    assert matches == lcs_length(keys_a, keys_b) == 4
    assert matches + actions.count(D) == len(keys_a)
    assert matches + actions.count(I) == len(keys_b)


def test_table_dimensions() -> None:
    table = build_lcs_table(["a", "b"], ["b"])
    assert len(table) == 3
    assert all(len(row) == 2 for row in table)
    assert table[2][1] == 1


def test_deterministic() -> None:
    keys_a = ["x", "y", "x", "z"]
    keys_b = ["y", "x", "z", "x"]
    assert align(keys_a, keys_b) == align(keys_a, keys_b)
