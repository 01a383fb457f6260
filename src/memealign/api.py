"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/api.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ._logging import get_logger
from .config import ReaderConfig
from .core.alignment import MotifAlignment
from .errors import WriteNotSupportedError
from .io.lines import LineInput
from .io.reader import MemeAlignmentReader, ReadResult

_LOG = get_logger(__name__)


def open_reader(source: LineInput, *, config: ReaderConfig | dict | None = None) -> MemeAlignmentReader:
    cfg = config if isinstance(config, ReaderConfig) else ReaderConfig(**(config or {}))
    return MemeAlignmentReader(source, alphabet=cfg.alphabet, encoding=cfg.encoding)


def iter_alignments(source: LineInput, *, alphabet: Optional[str] = None) -> Iterator[MotifAlignment]:
    with open_reader(source, config={"alphabet": alphabet}) as reader:
        yield from reader


def iter_results(source: LineInput, *, alphabet: Optional[str] = None) -> Iterator[ReadResult]:
    """
    Result-value iteration: yields each ReadResult up to and including the
    terminal one (an error, or the clean end-of-stream result).
    """
    with open_reader(source, config={"alphabet": alphabet}) as reader:
        while True:
            res = reader.next_result()
            yield res
            if not res.ok or res.exhausted:
                return


def read_alignments(path: str | Path, *, alphabet: Optional[str] = None) -> List[MotifAlignment]:
    alns = list(iter_alignments(Path(path), alphabet=alphabet))
    _LOG.info("Read %d alignment(s) from %s", len(alns), path)
    return alns


def parse_alignments(text: str, *, alphabet: Optional[str] = None) -> List[MotifAlignment]:
    return list(iter_alignments(StringIO(text), alphabet=alphabet))


def write_alignments(alignments: Iterable[MotifAlignment], target: object = None) -> None:
    raise WriteNotSupportedError("Writing alignments in MEME format is not implemented")
