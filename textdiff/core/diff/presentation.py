"""
Presentation adapters for diff records.

Pure transforms that reshape a diff for display or export. No
rendering happens here.
"""

from __future__ import annotations

from typing import Sequence

from textdiff.core.models import PLACEHOLDER, DiffKind, DiffRecord, SideBySideView


def to_side_by_side(records: Sequence[DiffRecord]) -> SideBySideView:
    """
    Split interleaved records into two aligned columns.

    Removed records go to the left with a blank cell on the right,
    added records the other way round, and unchanged records appear
    in both columns.
    """
    left: list[DiffRecord] = []
    right: list[DiffRecord] = []

    for record in records:
        if record.kind == DiffKind.REMOVED:
            left.append(record)
            right.append(PLACEHOLDER)
        elif record.kind == DiffKind.ADDED:
            left.append(PLACEHOLDER)
            right.append(record)
        else:
            left.append(record)
            right.append(record)

    return SideBySideView(left=left, right=right)


def format_diff_text(records: Sequence[DiffRecord]) -> str:
    """
    Render records as plain text, one per line.

    Each line is prefixed with '+ ', '- ' or two spaces.
    """
    return '\n'.join(f"{record.prefix} {record.content}" for record in records)
