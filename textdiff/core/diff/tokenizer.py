"""
Tokenizer for the text diff engine.

Splits text into comparison units (lines or words) and computes the
normalized key used for equality testing, while keeping the original
text for display.
"""

from __future__ import annotations

import re
from typing import Optional

from textdiff.core.models import CompareOptions, DiffMode, Token


LINE_SEPARATOR = '\n'

# Every character belongs to exactly one match
_WORD_PATTERN = re.compile(r'\S+|\s+')


def line_key(line: str, options: CompareOptions) -> str:
    """Normalize a line according to options."""
    result = line
    if options.ignore_whitespace:
        result = result.strip()
    if options.ignore_case:
        result = result.lower()
    return result


def word_key(word: str, options: CompareOptions) -> str:
    """Normalize a word or whitespace run according to options."""
    if options.ignore_case:
        return word.lower()
    return word


def split_lines(text: str) -> list[str]:
    """Split on '\\n'; the terminator is not retained."""
    return text.split(LINE_SEPARATOR)


def split_words(text: str) -> list[str]:
    """Split into alternating maximal runs of whitespace and non-whitespace."""
    return _WORD_PATTERN.findall(text)


def tokenize(
    text: str,
    mode: DiffMode,
    options: Optional[CompareOptions] = None
) -> list[Token]:
    """
    Tokenize text for comparison.

    Args:
        text: Source text
        mode: Line or word granularity
        options: Normalization options

    Returns:
        Tokens in document order. Joining the originals (with '\\n' in
        line mode) reproduces `text` exactly.
    """
    options = options or CompareOptions()

    if mode == DiffMode.WORDS:
        return [Token(word, word_key(word, options)) for word in split_words(text)]

    return [Token(line, line_key(line, options)) for line in split_lines(text)]
