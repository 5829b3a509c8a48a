"""
Bounded cache for comparison results.

The engine never memoizes on its own. Callers that recompute diffs
frequently (e.g. on every edit) can own one of these and route
comparisons through it.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import replace
from typing import Optional

from PyQt6.QtCore import QMutex, QMutexLocker

from textdiff.core.diff.text_diff import TextDiffEngine
from textdiff.core.models import CompareOptions, ComparisonResult, DiffMode


CacheKey = tuple[str, str, DiffMode, CompareOptions]


class DiffCache:
    """LRU cache keyed by (text1, text2, mode, options)."""

    def __init__(self, max_entries: int = 32):
        self.max_entries = max_entries
        self._entries: OrderedDict[CacheKey, ComparisonResult] = OrderedDict()
        self._mutex = QMutex()
        self.hits = 0
        self.misses = 0

    @property
    def enabled(self) -> bool:
        return self.max_entries > 0

    def __len__(self) -> int:
        with QMutexLocker(self._mutex):
            return len(self._entries)

    def get(self, key: CacheKey) -> Optional[ComparisonResult]:
        """Look up a result, marking it most recently used."""
        with QMutexLocker(self._mutex):
            result = self._entries.get(key)
            if result is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return result

    def put(self, key: CacheKey, result: ComparisonResult) -> None:
        """Store a result, evicting the least recently used entries."""
        if not self.enabled:
            return
        with QMutexLocker(self._mutex):
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def get_or_compute(
        self,
        engine: TextDiffEngine,
        text1: str,
        text2: str,
        mode: DiffMode = DiffMode.LINES,
        left_label: str = "left",
        right_label: str = "right"
    ) -> ComparisonResult:
        """
        Return a cached result or compute and store a new one.

        Labels are not part of the key; a hit is relabelled for this caller.
        """
        key = (text1, text2, mode, engine.options)
        cached = self.get(key)
        if cached is not None:
            logging.debug("DiffCache - hit")
            return replace(cached, left_label=left_label, right_label=right_label)

        result = engine.compare(text1, text2, mode, left_label, right_label)
        self.put(key, result)
        return result

    def clear(self) -> None:
        with QMutexLocker(self._mutex):
            self._entries.clear()
            self.hits = 0
            self.misses = 0
