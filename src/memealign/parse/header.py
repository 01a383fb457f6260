"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/parse/header.py

Document-level guards: the "MEME version" header and the HTML-output check.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import re
from typing import Optional

from ..errors import HtmlOutputDetectedError, UnsupportedVersionError

SUPPORTED_MAJOR_VERSIONS = frozenset({3, 4})

_VERSION_RE = re.compile(r"^\s*MEME\s+version\s+(?P<version>\S+)")
_MAJOR_RE = re.compile(r"^(\d)")
_HTML_TITLE_RE = re.compile(r"<TITLE>", re.IGNORECASE)


def match_version_header(line: str) -> Optional[str]:
    """Return the version token of a ``MEME version <token>`` line, else None."""
    m = _VERSION_RE.match(line)
    return m.group("version") if m else None


def validate_version(token: str, *, line: Optional[str] = None, line_number: Optional[int] = None) -> int:
    m = _MAJOR_RE.match(token)
    major = int(m.group(1)) if m else None
    if major not in SUPPORTED_MAJOR_VERSIONS:
        raise UnsupportedVersionError(
            f"MEME must be version 3 or 4, found '{token}'",
            line=line,
            line_number=line_number,
        )
    return major


def check_html(line: str, *, line_number: Optional[int] = None) -> None:
    if _HTML_TITLE_RE.search(line):
        raise HtmlOutputDetectedError(
            "MEME output file must be generated with the -text option (found HTML markup)",
            line_number=line_number,
        )
