"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/errors.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    MISSING_HEADER = "missing_header"
    UNSUPPORTED_VERSION = "unsupported_version"
    HTML_OUTPUT_DETECTED = "html_output_detected"
    UNRECOGNIZED_LINE = "unrecognized_line"
    TRUNCATED_SECTION = "truncated_section"
    RAGGED_ALIGNMENT = "ragged_alignment"
    NOT_IMPLEMENTED = "not_implemented"
    CONFIG = "config"


class MemeAlignError(Exception):
    """Base exception for this package."""

    kind: ErrorKind


class MemeParseError(MemeAlignError):
    """Fatal parse failure; the stream that raised it cannot produce more records."""

    def __init__(self, message: str, *, line: Optional[str] = None, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        if line is not None:
            message = f"{message}:\n{line}"
        super().__init__(message)


class MissingHeaderError(MemeParseError):
    kind = ErrorKind.MISSING_HEADER


class UnsupportedVersionError(MemeParseError):
    kind = ErrorKind.UNSUPPORTED_VERSION


class HtmlOutputDetectedError(MemeParseError):
    kind = ErrorKind.HTML_OUTPUT_DETECTED


class UnrecognizedLineError(MemeParseError):
    kind = ErrorKind.UNRECOGNIZED_LINE


class TruncatedSectionError(MemeParseError):
    kind = ErrorKind.TRUNCATED_SECTION


class RaggedAlignmentError(MemeAlignError, ValueError):
    """Sites of one motif differ in length, so they cannot form a column alignment."""

    kind = ErrorKind.RAGGED_ALIGNMENT


class WriteNotSupportedError(MemeAlignError, NotImplementedError):
    """Raised on any attempt to serialize alignments back into MEME text."""

    kind = ErrorKind.NOT_IMPLEMENTED


class ConfigError(MemeAlignError):
    kind = ErrorKind.CONFIG
