"""Tests for statistics and presentation adapters."""

from __future__ import annotations

from textdiff.core.diff.presentation import format_diff_text, to_side_by_side
from textdiff.core.diff.statistics import aggregate
from textdiff.core.diff.text_diff import diff_lines
from textdiff.core.models import PLACEHOLDER, DiffKind, DiffRecord, DiffStatistics


def test_side_by_side_alignment() -> None:
    records = diff_lines("a\nb\nc", "a\nx\nc")
    view = to_side_by_side(records)

    assert len(view.left) == len(view.right) == 4
    assert view.left[1].content == "b"
    assert view.right[1].content == ""
    assert view.left[2].content == ""
    assert view.right[2].content == "x"
    assert view.left[0] is view.right[0]


def test_side_by_side_placeholder_is_blank_unchanged() -> None:
    view = to_side_by_side([DiffRecord(DiffKind.ADDED, "new", new_line=1)])
    assert view.left == [PLACEHOLDER]
    assert view.left[0].kind == DiffKind.UNCHANGED
    assert view.left[0].old_line is None


def test_side_by_side_keeps_record_order() -> None:
    records = diff_lines("a\nb", "c\nd")
    view = to_side_by_side(records)
    rows = list(view.rows())
    assert len(rows) == len(records)
    for record, (left, right) in zip(records, rows):
        assert record in (left, right)


def test_side_by_side_empty() -> None:
    view = to_side_by_side([])
    assert len(view) == 0


def test_aggregate_counts() -> None:
    records = [
        DiffRecord(DiffKind.UNCHANGED, "a", 1, 1),
        DiffRecord(DiffKind.REMOVED, "b", old_line=2),
        DiffRecord(DiffKind.REMOVED, "c", old_line=3),
        DiffRecord(DiffKind.ADDED, "d", new_line=2),
    ]
    stats = aggregate(records)
    assert stats == DiffStatistics(additions=1, deletions=2, total=4)
    assert stats.unchanged == 1
    assert stats.has_changes
    assert stats.similarity_ratio == 0.25
    assert str(stats) == "+1 -2 =1"


def test_aggregate_accepts_iterators() -> None:
    stats = aggregate(iter([DiffRecord(DiffKind.ADDED, "x")]))
    assert stats.total == 1


def test_empty_statistics() -> None:
    stats = aggregate([])
    assert not stats.has_changes
    assert stats.similarity_ratio == 1.0
    assert stats.to_dict() == {"additions": 0, "deletions": 0, "total": 0}


def test_format_diff_text_prefixes() -> None:
    records = diff_lines("a\nb", "a\nc")
    assert format_diff_text(records) == "  a\n- b\n+ c"


def test_record_to_dict_omits_missing_lines() -> None:
    assert DiffRecord(DiffKind.ADDED, "x", new_line=4).to_dict() == {
        "kind": "added",
        "content": "x",
        "new_line": 4,
    }
    assert DiffRecord(DiffKind.UNCHANGED, "w").to_dict() == {
        "kind": "unchanged",
        "content": "w",
    }
