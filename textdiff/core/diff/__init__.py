"""
Diff module for text comparison operations.

Pipeline stages, leaves first:
- tokenizer: text -> tokens with comparison keys
- alignment: LCS over the keys -> match/insert/delete actions
- classifier: actions + tokens -> diff records
- statistics / presentation: counts and side-by-side columns
"""

from textdiff.core.diff.alignment import align, build_lcs_table, lcs_length
from textdiff.core.diff.classifier import classify
from textdiff.core.diff.presentation import format_diff_text, to_side_by_side
from textdiff.core.diff.statistics import aggregate
from textdiff.core.diff.text_diff import (
    TextDiffEngine,
    compute_statistics,
    diff_lines,
    diff_words,
)
from textdiff.core.diff.tokenizer import tokenize

__all__ = [
    # Engine
    'TextDiffEngine',
    'diff_lines',
    'diff_words',
    'compute_statistics',
    'to_side_by_side',
    'format_diff_text',
    # Stages
    'tokenize',
    'align',
    'build_lcs_table',
    'lcs_length',
    'classify',
    'aggregate',
]
