"""
Diff classifier.

Walks an alignment together with the original tokens and emits typed
diff records, numbering lines in line mode.
"""

from __future__ import annotations

from typing import Sequence

from textdiff.core.models import Action, DiffKind, DiffMode, DiffRecord, Token


def classify(
    actions: Sequence[Action],
    tokens_a: Sequence[Token],
    tokens_b: Sequence[Token],
    mode: DiffMode
) -> list[DiffRecord]:
    """
    Convert alignment actions into diff records.

    Args:
        actions: Output of the alignment engine for these tokens
        tokens_a: Tokens of the left/old text
        tokens_b: Tokens of the right/new text
        mode: Line numbers are attached only in line mode

    Returns:
        One record per action, in the same order.
    """
    numbered = mode == DiffMode.LINES
    records: list[DiffRecord] = []

    i = j = 0
    line_a = line_b = 1

    for action in actions:
        if action == Action.MATCH:
            records.append(DiffRecord(
                DiffKind.UNCHANGED,
                tokens_a[i].original,
                old_line=line_a if numbered else None,
                new_line=line_b if numbered else None,
            ))
            i += 1
            j += 1
            line_a += 1
            line_b += 1
        elif action == Action.DELETE:
            records.append(DiffRecord(
                DiffKind.REMOVED,
                tokens_a[i].original,
                old_line=line_a if numbered else None,
            ))
            i += 1
            line_a += 1
        else:
            records.append(DiffRecord(
                DiffKind.ADDED,
                tokens_b[j].original,
                new_line=line_b if numbered else None,
            ))
            j += 1
            line_b += 1

    return records
