"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/io/reader.py

Streaming reader that turns each "sites sorted by position p-value" section
of a MEME text report into one MotifAlignment.

Document states:

  AWAITING_HEADER -> AWAITING_SECTION -> IN_SECTION -> SECTION_COMPLETE
                          ^                                  |
                          +----------------------------------+

A valid "MEME version 3|4" header must precede any MOTIF line or sites
block. A blank line closes the open block and yields the record, scored with
the E-value of the MOTIF line seen before it. Every MemeParseError is
terminal for the stream: the reader moves to FAILED and re-raises it.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .._logging import get_logger
from ..core.alignment import AlignmentBuilder, MotifAlignment
from ..errors import MemeParseError, MissingHeaderError, TruncatedSectionError, WriteNotSupportedError
from ..parse.header import check_html, match_version_header, validate_version
from ..parse.sections import MotifHeader, is_decoration, is_section_end, is_section_start, match_motif_line
from ..parse.sites import parse_site_line
from .lines import LineInput, LineSource

_LOG = get_logger(__name__)

_NO_HEADER_MSG = "MEME output file contains no header line (example: MEME version 3.0)"


class ReaderStage(str, Enum):
    AWAITING_HEADER = "awaiting_header"
    AWAITING_SECTION = "awaiting_section"
    IN_SECTION = "in_section"
    SECTION_COMPLETE = "section_complete"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class ParserState:
    """Document-level state; one per stream, persists across records."""

    stage: ReaderStage = ReaderStage.AWAITING_HEADER
    version_confirmed: bool = False
    version: Optional[str] = None
    major_version: Optional[int] = None
    pending_motif: Optional[MotifHeader] = None
    sections_read: int = 0

    @property
    def in_section(self) -> bool:
        return self.stage is ReaderStage.IN_SECTION


@dataclass(frozen=True)
class ReadResult:
    """Outcome of one read: an alignment, an error, or a clean end of stream."""

    alignment: Optional[MotifAlignment] = None
    error: Optional[MemeParseError] = None

    @property
    def exhausted(self) -> bool:
        return self.alignment is None and self.error is None

    @property
    def ok(self) -> bool:
        return self.error is None


class MemeAlignmentReader:
    def __init__(self, source: LineInput | LineSource, *, alphabet: Optional[str] = None, encoding: str = "utf-8"):
        self._lines = source if isinstance(source, LineSource) else LineSource(source, encoding=encoding)
        self.state = ParserState()
        self.alphabet = alphabet
        self._builder = AlignmentBuilder(alphabet=alphabet)
        self._error: Optional[MemeParseError] = None

    # ── public API ────────────────────────────────────────────────────────────

    def next_alignment(self) -> Optional[MotifAlignment]:
        """Next finished alignment, or None once the stream is exhausted."""
        if self._error is not None:
            raise self._error
        try:
            return self._read_next()
        except MemeParseError as e:
            self._error = e
            self.state.stage = ReaderStage.FAILED
            self._lines.close()
            _LOG.debug("Reader failed on %s: %s", self._lines.name, e.kind.value)
            raise

    def next_result(self) -> ReadResult:
        try:
            return ReadResult(alignment=self.next_alignment())
        except MemeParseError as e:
            return ReadResult(error=e)

    def write_alignment(self, alignment: MotifAlignment) -> None:
        raise WriteNotSupportedError("Writing alignments in MEME format is not implemented")

    def close(self) -> None:
        self._lines.close()

    def __iter__(self) -> Iterator[MotifAlignment]:
        return self

    def __next__(self) -> MotifAlignment:
        aln = self.next_alignment()
        if aln is None:
            raise StopIteration
        return aln

    def __enter__(self) -> "MemeAlignmentReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── state machine ─────────────────────────────────────────────────────────

    def _read_next(self) -> Optional[MotifAlignment]:
        st = self.state
        if st.stage is ReaderStage.SECTION_COMPLETE:
            st.stage = ReaderStage.AWAITING_SECTION
        while True:
            line = self._lines.readline()
            if line is None:
                return self._end_of_stream()
            n = self._lines.line_number
            check_html(line, line_number=n)
            if st.in_section:
                aln = self._section_line(line, n)
                if aln is not None:
                    return aln
            else:
                self._outside_line(line, n)

    def _outside_line(self, line: str, n: int) -> None:
        st = self.state
        token = match_version_header(line)
        if token is not None:
            st.major_version = validate_version(token, line=line.rstrip("\r\n"), line_number=n)
            st.version = token
            st.version_confirmed = True
            if st.stage is ReaderStage.AWAITING_HEADER:
                st.stage = ReaderStage.AWAITING_SECTION
            _LOG.debug("%s: MEME version %s", self._lines.name, token)

        motif = match_motif_line(line, line_number=n)
        if motif is not None:
            self._require_header(n)
            st.pending_motif = motif

        if is_section_start(line):
            self._require_header(n)
            st.stage = ReaderStage.IN_SECTION
            _LOG.debug("%s: sites block opened at line %d", self._lines.name, n)

    def _section_line(self, line: str, n: int) -> Optional[MotifAlignment]:
        if is_decoration(line):
            return None
        if is_section_end(line):
            return self._close_section()
        self._builder.append(parse_site_line(line, line_number=n))
        return None

    def _close_section(self) -> MotifAlignment:
        st = self.state
        motif = st.pending_motif
        self._builder.meme_version = st.version
        if motif is None:
            aln = self._builder.finalize(None)
        else:
            aln = self._builder.finalize(
                motif.evalue,
                motif_id=motif.motif_id,
                motif_label=motif.motif_label,
                width=motif.width,
                nsites=motif.nsites,
                llr=motif.llr,
            )
        st.pending_motif = None
        st.sections_read += 1
        st.stage = ReaderStage.SECTION_COMPLETE
        _LOG.debug(
            "%s: section %d closed with %d site(s), E-value=%s",
            self._lines.name,
            st.sections_read,
            len(aln),
            aln.score,
        )
        return aln

    def _end_of_stream(self) -> None:
        st = self.state
        if not st.version_confirmed:
            raise MissingHeaderError(_NO_HEADER_MSG)
        if st.in_section:
            raise TruncatedSectionError(
                f"Stream ended inside an open sites block ({len(self._builder)} site(s) read)",
                line_number=self._lines.line_number,
            )
        st.stage = ReaderStage.EXHAUSTED
        return None

    def _require_header(self, n: int) -> None:
        if not self.state.version_confirmed:
            raise MissingHeaderError(_NO_HEADER_MSG, line_number=n)
