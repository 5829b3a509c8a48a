"""
File I/O service for reading and writing text files safely.

Handles:
- Encoding detection
- Binary file rejection
- Line ending detection and normalization
- Atomic writes
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional

import chardet


class LineEnding(Enum):
    """Line ending style."""
    LF = auto()      # Unix: \n
    CRLF = auto()    # Windows: \r\n
    CR = auto()      # Old Mac: \r
    MIXED = auto()   # Mixed endings
    NONE = auto()    # No line endings (single line)


@dataclass
class FileContent:
    """Container for file content with metadata."""
    content: str
    encoding: str
    line_ending: LineEnding
    bom: bool
    size: int

    @property
    def line_count(self) -> int:
        return self.content.count('\n') + 1


@dataclass
class ReadResult:
    """Result of a file read operation."""
    success: bool
    content: Optional[FileContent] = None
    error: Optional[str] = None
    is_binary: bool = False

    @property
    def text(self) -> str:
        return self.content.content if self.content else ""


@dataclass
class WriteResult:
    """Result of a file write operation."""
    success: bool
    bytes_written: int = 0
    error: Optional[str] = None


class FileIOService:
    """Service for safe text file I/O operations."""

    # Magic bytes that cannot open a text file. Printable-ASCII
    # signatures (MZ, %PDF, GIF8) are left to the content checks.
    BINARY_SIGNATURES = [
        b'\x00',           # Null byte (strong indicator)
        b'\x89PNG',        # PNG
        b'\xff\xd8\xff',   # JPEG
        b'PK\x03\x04',     # ZIP
        b'\x1f\x8b',       # GZIP
        b'\x7fELF',        # ELF
    ]

    # Byte order marks, checked longest first
    BOMS = [
        (b'\xef\xbb\xbf', 'utf-8-sig'),
        (b'\xff\xfe', 'utf-16'),
        (b'\xfe\xff', 'utf-16'),
    ]

    def __init__(
        self,
        default_encoding: str = 'utf-8',
        fallback_encoding: str = 'latin-1',
        binary_check_size: int = 8192
    ):
        self.default_encoding = default_encoding
        self.fallback_encoding = fallback_encoding
        self.binary_check_size = binary_check_size

    def read_file(
        self,
        path: Path | str,
        encoding: Optional[str] = None,
        normalize_line_endings: bool = False,
        max_text_size: int = 50 * 1024 * 1024  # 50MB default limit
    ) -> ReadResult:
        """
        Read a text file with automatic encoding detection.

        Args:
            path: Path to the file
            encoding: Force specific encoding (auto-detect if None)
            normalize_line_endings: Convert all line endings to \\n
            max_text_size: Maximum file size in bytes to read as text

        Returns:
            ReadResult with content or error information
        """
        path = Path(path)

        if not path.exists():
            return ReadResult(success=False, error=f"File not found: {path}")

        if not path.is_file():
            return ReadResult(success=False, error=f"Not a file: {path}")

        try:
            file_size = path.stat().st_size
            if file_size > max_text_size:
                return ReadResult(
                    success=False,
                    error=f"File too large for text comparison ({file_size / 1024 / 1024:.2f} MB). "
                          f"Max size is {max_text_size / 1024 / 1024:.2f} MB."
                )

            raw_content = path.read_bytes()

        except PermissionError:
            return ReadResult(success=False, error=f"Permission denied: {path}")
        except OSError as e:
            return ReadResult(success=False, error=f"OS error: {e}")

        bom_encoding = self._detect_bom(raw_content)

        if not bom_encoding and self._is_binary(raw_content[:self.binary_check_size]):
            return ReadResult(success=False, is_binary=True,
                              error="File appears to be binary")

        detected_encoding = bom_encoding or encoding or self._detect_encoding(raw_content)

        try:
            content = raw_content.decode(detected_encoding)
        except (UnicodeDecodeError, LookupError):
            logging.debug(f"FileIOService - {path} is not valid {detected_encoding}, "
                          f"falling back to {self.fallback_encoding}")
            content = raw_content.decode(self.fallback_encoding, errors='replace')
            detected_encoding = self.fallback_encoding

        line_ending = self._detect_line_ending(content)

        if normalize_line_endings:
            content = content.replace('\r\n', '\n').replace('\r', '\n')

        return ReadResult(
            success=True,
            content=FileContent(
                content=content,
                encoding=detected_encoding,
                line_ending=line_ending,
                bom=bom_encoding is not None,
                size=len(raw_content)
            )
        )

    def write_file(
        self,
        path: Path | str,
        content: str,
        encoding: str = 'utf-8',
        atomic: bool = True
    ) -> WriteResult:
        """
        Write text to a file.

        Args:
            path: Path to write to
            content: Text to write
            encoding: Encoding to use
            atomic: Use atomic write (write to temp then move)

        Returns:
            WriteResult with success status
        """
        path = Path(path)

        try:
            encoded = content.encode(encoding)
            path.parent.mkdir(parents=True, exist_ok=True)

            if atomic:
                fd, temp_path = tempfile.mkstemp(dir=path.parent)
                try:
                    with os.fdopen(fd, 'wb') as f:
                        f.write(encoded)
                    shutil.move(temp_path, path)
                except BaseException:
                    if os.path.exists(temp_path):
                        os.unlink(temp_path)
                    raise
            else:
                path.write_bytes(encoded)

            return WriteResult(success=True, bytes_written=len(encoded))

        except PermissionError:
            return WriteResult(success=False, error=f"Permission denied: {path}")
        except (OSError, UnicodeEncodeError) as e:
            return WriteResult(success=False, error=f"Write failed: {e}")

    def _detect_bom(self, content: bytes) -> Optional[str]:
        for bom, encoding in self.BOMS:
            if content.startswith(bom):
                return encoding
        return None

    def _is_binary(self, chunk: bytes) -> bool:
        """Check if the leading bytes of a file look binary."""
        for sig in self.BINARY_SIGNATURES:
            if chunk.startswith(sig):
                return True

        if b'\x00' in chunk:
            return True

        # Check ratio of non-text bytes
        non_text = sum(1 for b in chunk if b < 9 or (13 < b < 32))
        return len(chunk) > 0 and non_text / len(chunk) > 0.3

    def _detect_encoding(self, content: bytes) -> str:
        """Detect encoding of content."""
        if not content:
            return self.default_encoding

        try:
            content.decode(self.default_encoding)
            return self.default_encoding
        except UnicodeDecodeError:
            pass

        result = chardet.detect(content)

        if result['confidence'] > 0.7 and result['encoding']:
            encoding = result['encoding'].lower()
            if encoding == 'ascii':
                return 'utf-8'  # ASCII is subset of UTF-8
            return encoding

        return self.default_encoding

    def _detect_line_ending(self, content: str) -> LineEnding:
        """Detect line ending style in content."""
        crlf_count = content.count('\r\n')
        lf_count = content.count('\n') - crlf_count
        cr_count = content.count('\r') - crlf_count

        if crlf_count == 0 and lf_count == 0 and cr_count == 0:
            return LineEnding.NONE

        total = crlf_count + lf_count + cr_count

        if crlf_count == total:
            return LineEnding.CRLF
        elif lf_count == total:
            return LineEnding.LF
        elif cr_count == total:
            return LineEnding.CR
        else:
            return LineEnding.MIXED
