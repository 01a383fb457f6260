"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/io/protocols.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..core.alignment import MotifAlignment


@runtime_checkable
class AlignmentReader(Protocol):
    def next_alignment(self) -> Optional[MotifAlignment]: ...
    def write_alignment(self, alignment: MotifAlignment) -> None: ...
