"""Statistics aggregation for diff results."""

from __future__ import annotations

from typing import Iterable

from textdiff.core.models import DiffKind, DiffRecord, DiffStatistics


def aggregate(records: Iterable[DiffRecord]) -> DiffStatistics:
    """Count additions, deletions and total records in a single pass."""
    additions = deletions = total = 0

    for record in records:
        total += 1
        if record.kind == DiffKind.ADDED:
            additions += 1
        elif record.kind == DiffKind.REMOVED:
            deletions += 1

    return DiffStatistics(additions=additions, deletions=deletions, total=total)
