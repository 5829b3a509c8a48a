"""
Core comparison logic.

Everything under this package is pure: no I/O, no Qt, no state
kept between calls.
"""

from textdiff.core.diff import (
    TextDiffEngine,
    compute_statistics,
    diff_lines,
    diff_words,
    format_diff_text,
    to_side_by_side,
)
from textdiff.core.models import (
    Action,
    CompareOptions,
    ComparisonResult,
    DiffKind,
    DiffMode,
    DiffRecord,
    DiffStatistics,
    SideBySideView,
    Token,
)

__all__ = [
    'TextDiffEngine',
    'diff_lines',
    'diff_words',
    'compute_statistics',
    'to_side_by_side',
    'format_diff_text',
    'Action',
    'CompareOptions',
    'ComparisonResult',
    'DiffKind',
    'DiffMode',
    'DiffRecord',
    'DiffStatistics',
    'SideBySideView',
    'Token',
]
