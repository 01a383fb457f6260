"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/tests/test_reader.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from io import StringIO

import pytest

from memealign import iter_results, parse_alignments, read_alignments
from memealign.errors import (
    ErrorKind,
    HtmlOutputDetectedError,
    MissingHeaderError,
    TruncatedSectionError,
    UnrecognizedLineError,
    UnsupportedVersionError,
    WriteNotSupportedError,
)
from memealign.io.lines import LineSource
from memealign.io.protocols import AlignmentReader
from memealign.io.reader import MemeAlignmentReader, ReaderStage

HEADER = "MEME version 4.0.0\n\n"


def _reader(text: str, **kw) -> MemeAlignmentReader:
    return MemeAlignmentReader(StringIO(text), **kw)


# ── real reports ──────────────────────────────────────────────────────────────


def test_meme_v3_report(meme_v3_path):
    alns = read_alignments(meme_v3_path, alphabet="dna")
    assert len(alns) == 1
    aln = alns[0]
    assert aln.score == pytest.approx(1.2e-10)
    assert aln.motif_id == "1"
    assert aln.width == 10
    assert aln.nsites == 5
    assert aln.meme_version == "3.0"
    assert aln.alphabet == "dna"
    assert [s.sequence_name for s in aln] == ["629-C08", "407-A07", "105", "17", "625-H05"]
    assert all(s.strand == 1 for s in aln)
    assert aln.sites[-1].residues == "CTAGTGGGGC"
    assert aln.sites[2].left_flank is None
    assert aln.sites[3].right_flank is None


def test_meme_v4_report(meme_v4_path):
    first, second = read_alignments(meme_v4_path)
    assert first.score == pytest.approx(3.4e-5)
    assert first.motif_id == "MEME-1"
    assert first.motif_label == "TTGACA MEME-1"
    assert [s.strand for s in first] == [1, -1, 1, -1]
    assert (first.sites[0].start, first.sites[0].end) == (12, 17)
    assert first.sites[3].residues == "TTGACG"

    assert second.score == pytest.approx(110.0)
    assert second.motif_id == "MEME-2"
    assert [s.sequence_name for s in second] == ["promA", "promC", "promD"]


def test_two_sections_are_independent(two_section_text):
    reader = _reader(two_section_text)
    first = reader.next_alignment()
    second = reader.next_alignment()
    assert reader.next_alignment() is None

    assert first.score == pytest.approx(2.5e-3)
    assert [(s.sequence_name, s.strand, s.start, s.end) for s in first] == [
        ("seqA", 1, 12, 16),
        ("seqB", -1, 5, 9),
    ]
    assert first.sites[0].residues == "MOTIF"

    assert second.score == pytest.approx(70.0)
    assert [s.sequence_name for s in second] == ["seqC"]
    assert second.sites[0].residues == "TTAA"
    assert reader.state.sections_read == 2


def test_reader_iterates(two_section_text):
    with _reader(two_section_text) as reader:
        assert [len(a) for a in reader] == [2, 1]


def test_section_without_motif_line_has_no_score():
    text = HEADER + "Motif 1 sites sorted by position p-value\nseqA + 3 1e-3 AA GGCC TT\n\n"
    (aln,) = parse_alignments(text)
    assert aln.score is None
    assert aln.motif_id is None
    assert len(aln) == 1


def test_empty_section_yields_empty_alignment():
    text = HEADER + "MOTIF 1 width = 4 sites = 0 E-value = 1.0e+000\n" "Motif 1 sites sorted by position p-value\n----\n\n"
    (aln,) = parse_alignments(text)
    assert len(aln) == 0
    assert aln.score == pytest.approx(1.0)


def test_header_without_sections_is_clean_end():
    reader = _reader(HEADER + "nothing to see here\n")
    assert reader.next_alignment() is None
    assert reader.state.stage is ReaderStage.EXHAUSTED
    assert reader.next_alignment() is None


# ── stage transitions ─────────────────────────────────────────────────────────


def test_stage_transitions(two_section_text):
    reader = _reader(two_section_text)
    assert reader.state.stage is ReaderStage.AWAITING_HEADER
    reader.next_alignment()
    assert reader.state.stage is ReaderStage.SECTION_COMPLETE
    assert reader.state.version == "4.0.0"
    assert reader.state.major_version == 4
    reader.next_alignment()
    assert reader.state.stage is ReaderStage.SECTION_COMPLETE
    assert reader.state.pending_motif is None
    reader.next_alignment()
    assert reader.state.stage is ReaderStage.EXHAUSTED


# ── failures ──────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text",
    [
        "",
        "just some text\nwith no header\n",
        "Motif 1 sites sorted by position p-value\nseqA + 1 1e-3 . ACGT\n\nMEME version 4.0.0\n",
        "MOTIF 1 width = 4 sites = 1 E-value = 1e-3\nMEME version 4.0.0\n",
    ],
)
def test_missing_header(text):
    with pytest.raises(MissingHeaderError, match="no header line") as exc:
        parse_alignments(text)
    assert exc.value.kind is ErrorKind.MISSING_HEADER


def test_missing_header_reports_line_number():
    with pytest.raises(MissingHeaderError) as exc:
        parse_alignments("\n\nMotif 1 sites sorted by position p-value\n")
    assert exc.value.line_number == 3


def test_html_before_header():
    with pytest.raises(HtmlOutputDetectedError, match="-text"):
        parse_alignments("<HTML>\n<TITLE> MEME </TITLE>\nMEME version 4.0.0\n")


def test_html_inside_section():
    text = HEADER + "Motif 1 sites sorted by position p-value\n<TITLE>x</TITLE>\n\n"
    with pytest.raises(HtmlOutputDetectedError):
        parse_alignments(text)


def test_unsupported_version():
    with pytest.raises(UnsupportedVersionError, match="version 3 or 4") as exc:
        parse_alignments("MEME version 5.0.1\n\nMotif 1 sites sorted by position p-value\n\n")
    assert exc.value.line_number == 1


def test_unrecognized_line_is_terminal(two_section_text):
    bad = two_section_text.replace("2.0e-03 . ACGTA", "n/a")
    reader = _reader(bad)
    with pytest.raises(UnrecognizedLineError) as first:
        reader.next_alignment()
    assert first.value.line.startswith("seqB")
    assert first.value.line.endswith("n/a")
    assert reader.state.stage is ReaderStage.FAILED

    # the stream stays failed; the second section is never reached
    with pytest.raises(UnrecognizedLineError) as again:
        reader.next_alignment()
    assert again.value is first.value


def test_truncated_section():
    text = HEADER + "MOTIF 1 width = 4 sites = 1 E-value = 1e-3\nMotif 1 sites sorted by position p-value\nseqA + 1 1e-3 . ACGT"
    with pytest.raises(TruncatedSectionError, match="1 site"):
        parse_alignments(text)


def test_next_result_and_iter_results(two_section_text):
    results = list(iter_results(StringIO(two_section_text)))
    assert [r.ok for r in results] == [True, True, True]
    assert [len(r.alignment) for r in results[:2]] == [2, 1]
    assert results[-1].exhausted

    failing = list(iter_results(StringIO("MEME version 2.0\n")))
    assert len(failing) == 1
    assert not failing[0].ok
    assert failing[0].error.kind is ErrorKind.UNSUPPORTED_VERSION


def test_malformed_motif_metadata_is_reported_as_result():
    reader = _reader(HEADER + "MOTIF 1 width = 5 sites = 2 llr = - E-value = 2.5e-3\n")
    res = reader.next_result()
    assert not res.ok
    assert isinstance(res.error, UnrecognizedLineError)
    assert res.error.line_number == 3
    assert reader.state.stage is ReaderStage.FAILED
    assert reader.next_result().error is res.error


def test_write_is_not_supported(two_section_text):
    reader = _reader(two_section_text)
    aln = reader.next_alignment()
    with pytest.raises(NotImplementedError):
        reader.write_alignment(aln)
    with pytest.raises(WriteNotSupportedError):
        reader.write_alignment(aln)


def test_reader_satisfies_protocol(two_section_text):
    assert isinstance(_reader(two_section_text), AlignmentReader)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MemeAlignmentReader(tmp_path / "absent.txt")


def test_file_is_closed_after_exhaustion(write_meme, two_section_text):
    src = LineSource(write_meme(two_section_text))
    reader = MemeAlignmentReader(src)
    assert len(list(reader)) == 2
    assert src.exhausted
    assert src._owned is None


# ── line source ───────────────────────────────────────────────────────────────


def test_line_source_counts_lines():
    src = LineSource(["a\n", "b\n", "c"])
    assert src.readline() == "a\n"
    assert src.readline() == "b\n"
    assert src.line_number == 2
    assert src.readline() == "c"
    assert src.readline() is None
    assert src.readline() is None
    assert src.line_number == 3
    assert src.exhausted
