"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/__init__.py

MEME "sites sorted by position p-value" sections as alignment records.

Public API:
  - read_alignments / parse_alignments / iter_alignments
  - iter_results (result values instead of exceptions)
  - MemeAlignmentReader (streaming, one record per call)

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from .api import iter_alignments, iter_results, open_reader, parse_alignments, read_alignments, write_alignments
from .core.alignment import MotifAlignment, Site
from .errors import (
    ErrorKind,
    HtmlOutputDetectedError,
    MemeAlignError,
    MemeParseError,
    MissingHeaderError,
    RaggedAlignmentError,
    TruncatedSectionError,
    UnrecognizedLineError,
    UnsupportedVersionError,
    WriteNotSupportedError,
)
from .io.reader import MemeAlignmentReader, ReadResult

__all__ = [
    "ErrorKind",
    "HtmlOutputDetectedError",
    "MemeAlignError",
    "MemeAlignmentReader",
    "MemeParseError",
    "MissingHeaderError",
    "MotifAlignment",
    "RaggedAlignmentError",
    "ReadResult",
    "Site",
    "TruncatedSectionError",
    "UnrecognizedLineError",
    "UnsupportedVersionError",
    "WriteNotSupportedError",
    "iter_alignments",
    "iter_results",
    "open_reader",
    "parse_alignments",
    "read_alignments",
    "write_alignments",
]
