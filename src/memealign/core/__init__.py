"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/core/__init__.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from .alignment import AlignmentBuilder, MotifAlignment, Site

__all__ = ["AlignmentBuilder", "MotifAlignment", "Site"]
