"""
Core data models for the text comparison engine.

This module defines the data structures shared by every stage of the
diff pipeline:
- Comparison modes and options
- Tokens produced by the tokenizer
- Alignment actions produced by the LCS engine
- Diff records, statistics and side-by-side views

All models are designed to be:
- UI-agnostic (can be used with any frontend)
- Serializable (for caching/export)
- Immutable where practical
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, Optional


# =============================================================================
# Enumerations
# =============================================================================

class DiffMode(Enum):
    """Granularity of a comparison."""
    LINES = auto()  # One token per line
    WORDS = auto()  # Alternating whitespace / non-whitespace runs


class DiffKind(Enum):
    """Type of a record in a diff result."""
    UNCHANGED = auto()  # Present in both texts
    ADDED = auto()      # Present only in the right/new text
    REMOVED = auto()    # Present only in the left/old text


class Action(Enum):
    """Step of an alignment between two key sequences."""
    MATCH = auto()   # Consume one key from each side
    INSERT = auto()  # Consume one key from the right side
    DELETE = auto()  # Consume one key from the left side


# =============================================================================
# Options and tokens
# =============================================================================

@dataclass(frozen=True)
class CompareOptions:
    """
    Options controlling how tokens are compared.

    Both flags are independent. `ignore_whitespace` only applies in
    line mode, where it trims each line before comparison.
    """
    ignore_case: bool = False
    ignore_whitespace: bool = False


@dataclass(frozen=True)
class Token:
    """A unit of comparison: the original text plus its comparison key."""
    original: str
    compare_key: str


# =============================================================================
# Diff records
# =============================================================================

@dataclass(frozen=True)
class DiffRecord:
    """
    A single classified unit of a diff.

    Line numbers are 1-based and only set in line mode: `old_line`
    for unchanged/removed records, `new_line` for unchanged/added ones.
    """
    kind: DiffKind
    content: str
    old_line: Optional[int] = None
    new_line: Optional[int] = None

    @property
    def prefix(self) -> str:
        """Get the diff prefix character."""
        prefixes = {
            DiffKind.UNCHANGED: ' ',
            DiffKind.ADDED: '+',
            DiffKind.REMOVED: '-',
        }
        return prefixes[self.kind]

    @property
    def in_left(self) -> bool:
        """True if the record belongs to the left/old text."""
        return self.kind in (DiffKind.UNCHANGED, DiffKind.REMOVED)

    @property
    def in_right(self) -> bool:
        """True if the record belongs to the right/new text."""
        return self.kind in (DiffKind.UNCHANGED, DiffKind.ADDED)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'kind': self.kind.name.lower(),
            'content': self.content,
        }
        if self.old_line is not None:
            data['old_line'] = self.old_line
        if self.new_line is not None:
            data['new_line'] = self.new_line
        return data


# Empty cell used to pad the opposite column in side-by-side views
PLACEHOLDER = DiffRecord(DiffKind.UNCHANGED, "")


@dataclass(frozen=True)
class DiffStatistics:
    """Counts derived from a list of diff records."""
    additions: int = 0
    deletions: int = 0
    total: int = 0

    @property
    def unchanged(self) -> int:
        return self.total - self.additions - self.deletions

    @property
    def has_changes(self) -> bool:
        return self.additions > 0 or self.deletions > 0

    @property
    def similarity_ratio(self) -> float:
        """
        Calculate similarity ratio (0.0 to 1.0).

        1.0 means identical, 0.0 means nothing in common.
        """
        if self.total == 0:
            return 1.0
        return self.unchanged / self.total

    def to_dict(self) -> dict[str, int]:
        return {
            'additions': self.additions,
            'deletions': self.deletions,
            'total': self.total,
        }

    def __str__(self) -> str:
        return f"+{self.additions} -{self.deletions} ={self.unchanged}"


@dataclass(frozen=True)
class SideBySideView:
    """
    Two position-aligned columns for side-by-side display.

    Row `k` of `left` and row `k` of `right` describe the same
    position in the interleaved diff.
    """
    left: list[DiffRecord] = field(default_factory=list)
    right: list[DiffRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.left)

    def rows(self) -> Iterator[tuple[DiffRecord, DiffRecord]]:
        """Iterate over (left, right) pairs."""
        return zip(self.left, self.right)


@dataclass(frozen=True)
class ComparisonResult:
    """
    Complete result of comparing two texts.

    Bundles the records with the parameters that produced them,
    so callers (workers, caches, the CLI) can pass one object around.
    Immutable, since caches hand the same instance to every caller.
    """
    records: tuple[DiffRecord, ...]
    mode: DiffMode
    options: CompareOptions
    statistics: DiffStatistics
    left_label: str = "left"
    right_label: str = "right"

    @property
    def is_identical(self) -> bool:
        return not self.statistics.has_changes

    def side_by_side(self) -> SideBySideView:
        from textdiff.core.diff.presentation import to_side_by_side
        return to_side_by_side(self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            'left': self.left_label,
            'right': self.right_label,
            'mode': self.mode.name.lower(),
            'options': {
                'ignore_case': self.options.ignore_case,
                'ignore_whitespace': self.options.ignore_whitespace,
            },
            'statistics': self.statistics.to_dict(),
            'records': [record.to_dict() for record in self.records],
        }
