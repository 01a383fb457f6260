"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/io/__init__.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from .export import EXPORT_FORMATS, export_alignments
from .lines import LineSource
from .protocols import AlignmentReader
from .reader import MemeAlignmentReader, ParserState, ReaderStage, ReadResult

__all__ = [
    "EXPORT_FORMATS",
    "AlignmentReader",
    "LineSource",
    "MemeAlignmentReader",
    "ParserState",
    "ReadResult",
    "ReaderStage",
    "export_alignments",
]
