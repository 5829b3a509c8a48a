"""
Workers for text comparison operations.

The diff engine itself cannot be interrupted, so these workers
guard the input size before aligning and check for cancellation
between pipeline stages.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from PyQt6.QtCore import QObject

from textdiff.core.diff.statistics import aggregate
from textdiff.core.diff.text_diff import TextDiffEngine
from textdiff.core.models import CompareOptions, ComparisonResult, DiffMode, Token
from textdiff.services.diff_cache import DiffCache
from textdiff.services.file_io import FileIOService
from textdiff.workers.base_worker import BaseWorker


DEFAULT_MAX_TOKENS = 20000


class InputTooLargeError(ValueError):
    """Raised when an input has more tokens than a worker accepts."""

    def __init__(self, label: str, token_count: int, max_tokens: int):
        super().__init__(
            f"{label} has {token_count} tokens, more than the limit of {max_tokens}"
        )
        self.label = label
        self.token_count = token_count
        self.max_tokens = max_tokens


def check_input_size(tokens: Sequence[Token], label: str, max_tokens: int) -> None:
    """Refuse inputs whose token count exceeds `max_tokens` (0 disables)."""
    if max_tokens > 0 and len(tokens) > max_tokens:
        raise InputTooLargeError(label, len(tokens), max_tokens)


class TextDiffWorker(BaseWorker):
    """
    Worker for comparing text content already in memory.

    Emits a ComparisonResult through `signals.finished`.
    """

    def __init__(
        self,
        left_text: str,
        right_text: str,
        mode: DiffMode = DiffMode.LINES,
        options: Optional[CompareOptions] = None,
        left_label: str = "left",
        right_label: str = "right",
        max_tokens: int = DEFAULT_MAX_TOKENS,
        cache: Optional[DiffCache] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.left_text = left_text
        self.right_text = right_text
        self.mode = mode
        self.options = options or CompareOptions()
        self.left_label = left_label
        self.right_label = right_label
        self.max_tokens = max_tokens
        self.cache = cache

    def do_work(self) -> ComparisonResult:
        return self.compare_texts(self.left_text, self.right_text)

    def compare_texts(self, left_text: str, right_text: str) -> ComparisonResult:
        """Run the pipeline stage by stage with cancellation checks."""
        key = (left_text, right_text, self.mode, self.options)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                self.report_status("Complete (cached)")
                return replace(cached, left_label=self.left_label, right_label=self.right_label)

        engine = TextDiffEngine(self.options)

        self.report_progress(0, 3, "Tokenizing...")
        if not left_text and not right_text:
            left_tokens: list[Token] = []
            right_tokens: list[Token] = []
        else:
            left_tokens = engine.tokenize(left_text, self.mode)
            right_tokens = engine.tokenize(right_text, self.mode)
        check_input_size(left_tokens, self.left_label, self.max_tokens)
        check_input_size(right_tokens, self.right_label, self.max_tokens)
        self.check_cancelled()

        self.report_progress(1, 3, "Computing differences...")
        logging.debug(
            f"TextDiffWorker - aligning {len(left_tokens)} x {len(right_tokens)} tokens"
        )
        records = engine.diff_tokens(left_tokens, right_tokens, self.mode)
        self.check_cancelled()

        self.report_progress(2, 3, "Collecting statistics...")
        result = ComparisonResult(
            records=tuple(records),
            mode=self.mode,
            options=self.options,
            statistics=aggregate(records),
            left_label=self.left_label,
            right_label=self.right_label,
        )

        if self.cache is not None:
            self.cache.put(key, result)

        self.report_progress(3, 3, "Complete")
        self.report_status("Complete")
        return result


class FileDiffWorker(TextDiffWorker):
    """
    Worker for comparing two text files.

    Files are decoded with encoding detection and line endings
    normalized to '\\n' before comparison.
    """

    def __init__(
        self,
        left_path: str | Path,
        right_path: str | Path,
        mode: DiffMode = DiffMode.LINES,
        options: Optional[CompareOptions] = None,
        encoding: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        cache: Optional[DiffCache] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(
            "", "",
            mode=mode,
            options=options,
            left_label=str(left_path),
            right_label=str(right_path),
            max_tokens=max_tokens,
            cache=cache,
            parent=parent,
        )
        self.left_path = Path(left_path)
        self.right_path = Path(right_path)
        self.encoding = encoding
        self.file_io = FileIOService()

    def do_work(self) -> ComparisonResult:
        """Read both files and compare them."""
        self.report_status(f"Comparing {self.left_path.name}...")

        self.left_text = self._read(self.left_path, "left")
        self.check_cancelled()
        self.right_text = self._read(self.right_path, "right")
        self.check_cancelled()

        return self.compare_texts(self.left_text, self.right_text)

    def _read(self, path: Path, side: str) -> str:
        read_result = self.file_io.read_file(
            path, encoding=self.encoding, normalize_line_endings=True
        )
        if not read_result.success:
            if read_result.is_binary:
                raise IOError(f"File appears to be binary and cannot be compared as text: {path}")
            raise IOError(f"Failed to read {side} file: {read_result.error}")
        return read_result.text
