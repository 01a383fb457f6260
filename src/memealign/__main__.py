"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/__main__.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from .cli import main

if __name__ == "__main__":
    main()
