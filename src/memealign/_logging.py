"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/_logging.py

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import logging

_PACKAGE_LOGGER = "memealign"


def get_logger(name: str = _PACKAGE_LOGGER) -> logging.Logger:
    """Library-friendly logger. Handlers are left to the application (see _console)."""
    if not name.startswith(_PACKAGE_LOGGER):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


# Library code stays silent unless the caller configures logging.
logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())
