"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/parse/sections.py

Recognizers for the boundaries of a "sites sorted by position p-value" block
and for the MOTIF summary line that carries its E-value.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..errors import UnrecognizedLineError

# v3 / early v4:  MOTIF  1	width =   10   sites =  11   llr = 134   E-value = 1.2e-010
# v4.10+:         MOTIF CTATTGGGGC MEME-1	width =  10  sites =  11  llr = 134  E-value = 1.2e-010
_MOTIF_RE = re.compile(
    r"MOTIF\s+(?P<id>\S+)(?:\s+(?P<alt>\S+))?\s+width\s*=\s*(?P<width>\d+).*E-value\s*=\s*(?P<evalue>\S+)"
)
_META_KV_RE = re.compile(r"(\w+)\s*=\s*([0-9.eE+-]+)")
_SECTION_START = "sites sorted by position"


@dataclass(frozen=True, slots=True)
class MotifHeader:
    motif_id: str
    motif_label: str
    width: int
    evalue: float
    nsites: Optional[int] = None
    llr: Optional[float] = None


def match_motif_line(line: str, *, line_number: Optional[int] = None) -> Optional[MotifHeader]:
    m = _MOTIF_RE.search(line)
    if not m:
        return None
    meta = {k.lower(): v for k, v in _META_KV_RE.findall(line)}
    field, raw = "E-value", m.group("evalue")
    try:
        evalue = float(raw)
        field, raw = "sites", meta.get("sites")
        nsites = int(float(raw)) if raw is not None else None
        field, raw = "llr", meta.get("llr")
        llr = float(raw) if raw is not None else None
    except ValueError as exc:
        raise UnrecognizedLineError(
            f"Malformed {field} '{raw}' in MOTIF line",
            line=line.rstrip("\r\n"),
            line_number=line_number,
        ) from exc

    first, alt = m.group("id"), m.group("alt")
    return MotifHeader(
        motif_id=alt or first,
        motif_label=f"{first} {alt}" if alt else first,
        width=int(m.group("width")),
        evalue=evalue,
        nsites=nsites,
        llr=llr,
    )


def is_section_start(line: str) -> bool:
    return _SECTION_START in line


def is_section_end(line: str) -> bool:
    return not line.strip()


def is_decoration(line: str) -> bool:
    """Rules and the column header row inside a sites block."""
    return line.startswith("-") or "Sequence name" in line
