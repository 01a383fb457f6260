"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/parse/__init__.py

Line classifiers used by the MEME alignment reader.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from .header import check_html, match_version_header, validate_version
from .sections import MotifHeader, is_decoration, is_section_end, is_section_start, match_motif_line
from .sites import match_v3_site, match_v4_site, parse_site_line

__all__ = [
    "MotifHeader",
    "check_html",
    "is_decoration",
    "is_section_end",
    "is_section_start",
    "match_motif_line",
    "match_v3_site",
    "match_v4_site",
    "match_version_header",
    "parse_site_line",
    "validate_version",
]
