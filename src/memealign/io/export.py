"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/io/export.py

Hand parsed MEME alignments to other alignment formats (Bio.AlignIO) or JSON.
MEME itself is read-only.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Iterable, List, Union

from Bio import AlignIO

from .._logging import get_logger
from ..core.alignment import MotifAlignment
from ..errors import ConfigError, WriteNotSupportedError

_LOG = get_logger(__name__)

ALIGNIO_FORMATS = ("fasta", "clustal", "stockholm", "phylip-relaxed")
EXPORT_FORMATS = ("json",) + ALIGNIO_FORMATS

Target = Union[str, Path, IO[str]]


def export_alignments(alignments: Iterable[MotifAlignment], target: Target, fmt: str) -> int:
    """Write alignments to *target*; returns the number of alignments written."""
    fmt = fmt.lower()
    if fmt == "meme":
        raise WriteNotSupportedError("Writing alignments in MEME format is not implemented")
    if fmt not in EXPORT_FORMATS:
        raise ConfigError(f"Unsupported export format '{fmt}'. Choose one of: {', '.join(EXPORT_FORMATS)}")

    alns: List[MotifAlignment] = list(alignments)
    if fmt == "json":
        payload = [a.to_dict() for a in alns]
        if isinstance(target, (str, Path)):
            Path(target).write_text(json.dumps(payload, indent=2) + "\n")
        else:
            json.dump(payload, target, indent=2)
            target.write("\n")
        return len(alns)

    non_empty = [a for a in alns if len(a)]
    if len(non_empty) < len(alns):
        _LOG.warning("Skipping %d alignment(s) with no sites for %s export", len(alns) - len(non_empty), fmt)
    if not non_empty:
        return 0
    target_arg = str(target) if isinstance(target, Path) else target
    return AlignIO.write([a.to_biopython() for a in non_empty], target_arg, fmt)
