"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/io/lines.py

One-line-at-a-time source over a path, an open text handle, or any iterable
of strings. Never reads ahead.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

LineInput = Union[str, Path, IO[str], Iterable[str]]


class LineSource:
    def __init__(self, source: LineInput, *, encoding: str = "utf-8"):
        self._owned: Optional[IO[str]] = None
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.is_file():
                raise FileNotFoundError(f"MEME file not found: {path}")
            self._owned = path.open("r", encoding=encoding, errors="replace")
            self._it: Iterator[str] = iter(self._owned)
            self.name = str(path)
        else:
            self._it = iter(source)
            self.name = getattr(source, "name", "<stream>")
        self.line_number = 0
        self.exhausted = False

    def readline(self) -> Optional[str]:
        """Next line (terminator included when present), or None at end of stream."""
        if self.exhausted:
            return None
        line = next(self._it, None)
        if line is None:
            self.exhausted = True
            self.close()
            return None
        self.line_number += 1
        return line

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line

    def close(self) -> None:
        if self._owned is not None:
            self._owned.close()
            self._owned = None

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
