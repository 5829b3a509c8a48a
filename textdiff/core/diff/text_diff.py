"""
Text diff engine.

Provides line-by-line and word-by-word comparison with support for:
- Case-insensitive comparison
- Leading/trailing whitespace trimming (line mode)
- Deterministic LCS alignment
- Statistics and side-by-side views of the result

The engine is stateless: every call builds its own tokens, table and
records, so one instance can be shared between threads.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from textdiff.core.diff.alignment import Aligner, align
from textdiff.core.diff.classifier import classify
from textdiff.core.diff.presentation import to_side_by_side
from textdiff.core.diff.statistics import aggregate
from textdiff.core.diff.tokenizer import tokenize
from textdiff.core.models import (
    CompareOptions,
    ComparisonResult,
    DiffMode,
    DiffRecord,
    DiffStatistics,
    SideBySideView,
    Token,
)


class TextDiffEngine:
    """
    Engine for comparing two texts.

    Args:
        options: Normalization options applied to both sides
        aligner: Function turning two key sequences into actions.
            Defaults to the LCS aligner.
    """

    def __init__(
        self,
        options: Optional[CompareOptions] = None,
        aligner: Aligner = align
    ):
        self.options = options or CompareOptions()
        self.aligner = aligner

    def tokenize(self, text: str, mode: DiffMode) -> list[Token]:
        """Tokenize one side with this engine's options."""
        return tokenize(text, mode, self.options)

    def diff_tokens(
        self,
        tokens_a: Sequence[Token],
        tokens_b: Sequence[Token],
        mode: DiffMode
    ) -> list[DiffRecord]:
        """Align and classify already tokenized input."""
        actions = self.aligner(
            [token.compare_key for token in tokens_a],
            [token.compare_key for token in tokens_b],
        )
        return classify(actions, tokens_a, tokens_b, mode)

    def diff(self, text1: str, text2: str, mode: DiffMode = DiffMode.LINES) -> list[DiffRecord]:
        """
        Compare two texts.

        Returns:
            Records in document order. Two empty texts give no records.
        """
        if not text1 and not text2:
            return []

        return self.diff_tokens(
            self.tokenize(text1, mode),
            self.tokenize(text2, mode),
            mode,
        )

    def diff_lines(self, text1: str, text2: str) -> list[DiffRecord]:
        return self.diff(text1, text2, DiffMode.LINES)

    def diff_words(self, text1: str, text2: str) -> list[DiffRecord]:
        return self.diff(text1, text2, DiffMode.WORDS)

    def compare(
        self,
        text1: str,
        text2: str,
        mode: DiffMode = DiffMode.LINES,
        left_label: str = "left",
        right_label: str = "right"
    ) -> ComparisonResult:
        """
        Compare two texts and bundle records with their statistics.

        Args:
            text1: Left/original text
            text2: Right/modified text
            mode: Line or word granularity
            left_label: Label for the left text
            right_label: Label for the right text

        Returns:
            ComparisonResult containing all diff information
        """
        records = self.diff(text1, text2, mode)
        stats = aggregate(records)

        logging.debug(
            f"TextDiffEngine - {left_label} vs {right_label} "
            f"({mode.name.lower()}): {stats}"
        )

        return ComparisonResult(
            records=tuple(records),
            mode=mode,
            options=self.options,
            statistics=stats,
            left_label=left_label,
            right_label=right_label,
        )


def diff_lines(
    text1: str,
    text2: str,
    options: Optional[CompareOptions] = None
) -> list[DiffRecord]:
    """Line-level diff of two texts."""
    return TextDiffEngine(options).diff_lines(text1, text2)


def diff_words(
    text1: str,
    text2: str,
    options: Optional[CompareOptions] = None
) -> list[DiffRecord]:
    """Word-level diff of two texts. Only `ignore_case` applies."""
    return TextDiffEngine(options).diff_words(text1, text2)


def compute_statistics(records: Sequence[DiffRecord]) -> DiffStatistics:
    """Additions, deletions and total record count."""
    return aggregate(records)


__all__ = [
    'TextDiffEngine',
    'diff_lines',
    'diff_words',
    'compute_statistics',
    'to_side_by_side',
    'SideBySideView',
]
