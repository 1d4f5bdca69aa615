from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def _level_for(verbosity: int) -> int:
    override = os.getenv("CONTENT_BRIDGE_LOG_LEVEL")
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    return _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)


def configure_logging(verbosity: int = 0) -> None:
    """Route log records through rich on stderr.

    ``-v`` enables INFO and ``-vv`` DEBUG. ``CONTENT_BRIDGE_LOG_LEVEL`` wins
    over the command-line verbosity when it names a known level.
    """
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbosity > 1,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=_level_for(verbosity),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
