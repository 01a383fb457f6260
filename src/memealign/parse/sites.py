"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/parse/sites.py

Site rows inside a "sites sorted by position p-value" block.

Two layouts are recognized and tried in a fixed order (first match wins):

  v4 style:  <name> [+|-] <start> <p-value> <left-flank> <SITE> <right-flank>
  v3 style:  <name> [+|-] <start> <p-value> . <SITE>

Flanks may be missing or a lone '.', the strand column is absent in
single-strand runs. The central site is matched case-insensitively and stored
upper-cased; MEME reports the start on the left-hand side of the site relative
to the input sequence.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence

from ..core.alignment import Site
from ..errors import UnrecognizedLineError

_V4_SITE_RE = re.compile(
    r"^(?P<name>\S+)\s+(?:(?P<strand>[+-])\s+)?(?P<start>\d+)\s+(?P<pvalue>\S+)\s+"
    r"(?P<left>[.A-Z\-]*)\s+(?P<central>[A-Z\-]+)(?:\s+(?P<right>[.A-Z\-]*))?(?=\s|$)",
    re.IGNORECASE,
)
_V3_SITE_RE = re.compile(
    r"^(?P<name>\S+)\s+(?:(?P<strand>[+-])\s+)?(?P<start>\d+)\s+(?P<pvalue>\S+)\s+\.\s+(?P<central>[A-Z\-]+)",
    re.IGNORECASE,
)
_FLOAT_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")


def _flank(raw: Optional[str]) -> Optional[str]:
    if not raw or raw == ".":
        return None
    return raw.upper()


def _pvalue(raw: str) -> Optional[float]:
    return float(raw) if _FLOAT_RE.match(raw) else None


def _site_from_match(m: re.Match) -> Site:
    groups = m.groupdict()
    return Site(
        sequence_name=groups["name"],
        strand=-1 if groups["strand"] == "-" else 1,
        start=int(groups["start"]),
        residues=groups["central"].upper(),
        pvalue=_pvalue(groups["pvalue"]),
        left_flank=_flank(groups.get("left")),
        right_flank=_flank(groups.get("right")),
    )


def match_v4_site(line: str) -> Optional[Site]:
    m = _V4_SITE_RE.match(line)
    return _site_from_match(m) if m else None


def match_v3_site(line: str) -> Optional[Site]:
    m = _V3_SITE_RE.match(line)
    return _site_from_match(m) if m else None


SITE_MATCHERS: Sequence[Callable[[str], Optional[Site]]] = (match_v4_site, match_v3_site)


def parse_site_line(line: str, *, line_number: Optional[int] = None) -> Site:
    text = line.rstrip("\r\n")
    for matcher in SITE_MATCHERS:
        try:
            site = matcher(text)
        except ValueError as exc:
            raise UnrecognizedLineError(f"Invalid site row: {exc}", line=text, line_number=line_number) from exc
        if site is not None:
            return site
    raise UnrecognizedLineError("Unrecognized format", line=text, line_number=line_number)
