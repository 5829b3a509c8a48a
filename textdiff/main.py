"""
Command line entry point for TextDiff.

This module handles:
- Command line argument parsing
- Logging configuration
- Settings loading and overrides
- Running a comparison and printing or exporting the result
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional

from textdiff import __version__
from textdiff.core.diff.presentation import format_diff_text
from textdiff.core.models import ComparisonResult, DiffKind, DiffMode, DiffRecord
from textdiff.services.file_io import FileIOService
from textdiff.services.settings import DiffStyle, SettingsManager
from textdiff.workers.compare_worker import FileDiffWorker


# =============================================================================
# Constants
# =============================================================================

APP_NAME = "textdiff"

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


class OutputFormat(Enum):
    """How a comparison is printed."""
    TEXT = "text"
    SIDE_BY_SIDE = "side-by-side"
    JSON = "json"
    STATS = "stats"


STYLE_FORMATS = {
    DiffStyle.UNIFIED: OutputFormat.TEXT,
    DiffStyle.SIDE_BY_SIDE: OutputFormat.SIDE_BY_SIDE,
}


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class CommandLineArgs:
    """Parsed command line arguments."""
    left_path: str = ""
    right_path: str = ""
    mode: Optional[DiffMode] = None
    ignore_case: Optional[bool] = None
    ignore_whitespace: Optional[bool] = None
    output_format: Optional[OutputFormat] = None
    output_path: Optional[str] = None
    max_tokens: Optional[int] = None
    width: int = 80
    config_file: Optional[str] = None
    log_level: str = "WARNING"


# =============================================================================
# Logging Setup
# =============================================================================

class LogFormatter(logging.Formatter):
    """Custom log formatter with colors for console."""

    COLORS = {
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelno, '')
            return f"{color}{formatted}{self.RESET}"

        return formatted


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure application logging.

    Console output goes to stderr so it never mixes with the diff.

    Args:
        level: Log level string
        log_file: Optional file path for logging

    Returns:
        Root logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(LogFormatter(use_colors=True))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(LogFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger('chardet').setLevel(logging.WARNING)

    return root_logger


# =============================================================================
# Command Line Parsing
# =============================================================================

def parse_arguments(args: Optional[List[str]] = None) -> CommandLineArgs:
    """
    Parse command line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Compare two text files line by line or word by word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s old.txt new.txt               Line diff
  %(prog)s -w -i old.md new.md           Case-insensitive word diff
  %(prog)s --format json a.txt b.txt     Machine-readable output

Exit status is 0 if the inputs are identical, 1 if they differ
and 2 on error.
        """
    )

    parser.add_argument('left', help='Left/original file')
    parser.add_argument('right', help='Right/modified file')

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '-l', '--lines',
        dest='mode', action='store_const', const=DiffMode.LINES,
        help='Compare line by line'
    )
    mode_group.add_argument(
        '-w', '--words',
        dest='mode', action='store_const', const=DiffMode.WORDS,
        help='Compare word by word'
    )

    parser.add_argument(
        '-i', '--ignore-case',
        action='store_true', default=None,
        help='Treat upper and lower case as equal'
    )
    parser.add_argument(
        '-b', '--ignore-whitespace',
        action='store_true', default=None,
        help='Ignore leading and trailing whitespace on each line'
    )

    parser.add_argument(
        '-f', '--format',
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help='Output format (default from the diff_style setting)'
    )
    parser.add_argument(
        '-o', '--output',
        help='Write the diff to this file instead of stdout'
    )
    parser.add_argument(
        '--width',
        type=int, default=80,
        help='Total width of side-by-side output'
    )
    parser.add_argument(
        '--max-tokens',
        type=int, default=None,
        help='Refuse inputs with more lines/words than this (0 = no limit)'
    )

    parser.add_argument(
        '-c', '--config',
        help='Settings file path'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Log level'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} {__version__}'
    )

    parsed = parser.parse_args(args)

    return CommandLineArgs(
        left_path=parsed.left,
        right_path=parsed.right,
        mode=parsed.mode,
        ignore_case=parsed.ignore_case,
        ignore_whitespace=parsed.ignore_whitespace,
        output_format=OutputFormat(parsed.format) if parsed.format else None,
        output_path=parsed.output,
        max_tokens=parsed.max_tokens,
        width=parsed.width,
        config_file=parsed.config,
        log_level='DEBUG' if parsed.verbose else parsed.log_level,
    )


# =============================================================================
# Output
# =============================================================================

def _cell(record: DiffRecord, line_num: Optional[int], width: int, numbered: bool) -> str:
    text = record.content.replace('\t', '    ')
    if numbered:
        number = f"{line_num:>4} " if line_num is not None else "     "
        text = number + text
    return text[:width].ljust(width)


def format_side_by_side(
    result: ComparisonResult,
    width: int = 80,
    show_line_numbers: bool = True
) -> str:
    """Render the two-column view as plain text."""
    numbered = show_line_numbers and result.mode == DiffMode.LINES
    column = max((width - 3) // 2, 1)
    lines = []
    for left, right in result.side_by_side().rows():
        if left.kind == DiffKind.REMOVED:
            marker = "<"
        elif right.kind == DiffKind.ADDED:
            marker = ">"
        else:
            marker = " "
        lines.append(
            f"{_cell(left, left.old_line, column, numbered)} {marker} "
            f"{_cell(right, right.new_line, column, numbered)}".rstrip()
        )
    return '\n'.join(lines)


def render(
    result: ComparisonResult,
    output_format: OutputFormat,
    width: int = 80,
    show_line_numbers: bool = True
) -> str:
    """Render a comparison in the requested format."""
    if output_format == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if output_format == OutputFormat.STATS:
        stats = result.statistics
        return (f"additions: {stats.additions}\n"
                f"deletions: {stats.deletions}\n"
                f"total: {stats.total}")
    if output_format == OutputFormat.SIDE_BY_SIDE:
        return format_side_by_side(result, width, show_line_numbers)
    return format_diff_text(result.records)


# =============================================================================
# Main Function
# =============================================================================

def run(args: CommandLineArgs) -> int:
    """Run one comparison. Returns the process exit code."""
    settings_manager = SettingsManager(Path(args.config_file) if args.config_file else None)
    comparison = settings_manager.settings.comparison

    options = comparison.to_compare_options()
    if args.ignore_case is not None:
        options = replace(options, ignore_case=args.ignore_case)
    if args.ignore_whitespace is not None:
        options = replace(options, ignore_whitespace=args.ignore_whitespace)

    worker = FileDiffWorker(
        args.left_path,
        args.right_path,
        mode=args.mode or comparison.diff_mode,
        options=options,
        max_tokens=args.max_tokens if args.max_tokens is not None else comparison.max_tokens,
    )
    worker.run()

    if worker.error:
        _, message = worker.error
        print(f"{APP_NAME}: {message}", file=sys.stderr)
        return EXIT_ERROR

    result: ComparisonResult = worker.result
    output_format = args.output_format or STYLE_FORMATS[comparison.diff_style]
    output = render(result, output_format, args.width, comparison.show_line_numbers)

    if args.output_path:
        write_result = FileIOService().write_file(args.output_path, output + '\n')
        if not write_result.success:
            logging.error(write_result.error)
            print(f"{APP_NAME}: {write_result.error}", file=sys.stderr)
            return EXIT_ERROR
        logging.info(f"Wrote diff to {args.output_path}")
    elif output:
        print(output)

    logging.info(f"{result.left_label} vs {result.right_label}: {result.statistics}")
    return EXIT_IDENTICAL if result.is_identical else EXIT_DIFFERENT


def main(argv: Optional[List[str]] = None) -> int:
    """
    Application main entry point.

    Returns:
        Exit code (0 identical, 1 different, 2 error)
    """
    args = parse_arguments(argv)
    setup_logging(args.log_level)
    logging.debug(f"Starting {APP_NAME} v{__version__}")

    try:
        return run(args)
    except KeyboardInterrupt:
        logging.warning("Interrupted")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
