"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/tests/conftest.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path

import pytest

_DATA_DIR = Path(__file__).resolve().parent / "data"

TWO_SECTION_TEXT = """\
MEME version 4.0.0

MOTIF  1	width =   5   sites =   2   llr = 20   E-value = 2.5e-003
Motif 1 sites sorted by position p-value
--------------------------------------------------------------------------------
Sequence name            Strand  Start   P-value               Site
-------------            ------  ----- ---------            -----
seqA                         +     12  1.0e-03 AACGT MOTIF TTGGC
seqB                         -      5  2.0e-03 . ACGTA
--------------------------------------------------------------------------------

MOTIF  2	width =   4   sites =   1   llr = 9   E-value = 7.0e+001
Motif 2 sites sorted by position p-value
--------------------------------------------------------------------------------
seqC                         +      3  4.0e-03 GG TTAA CC
--------------------------------------------------------------------------------

"""


# fixtures
@pytest.fixture
def data_dir() -> Path:
    return _DATA_DIR


@pytest.fixture
def meme_v3_path() -> Path:
    return _DATA_DIR / "meme_v3.txt"


@pytest.fixture
def meme_v4_path() -> Path:
    return _DATA_DIR / "meme_v4.txt"


@pytest.fixture
def two_section_text() -> str:
    return TWO_SECTION_TEXT


@pytest.fixture
def write_meme(tmp_path: Path):
    """Write MEME text to a temp file and hand back its path."""

    def _write(text: str, name: str = "meme.txt") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
