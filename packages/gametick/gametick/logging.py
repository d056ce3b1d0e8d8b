"""Logging setup for tick loop hosts."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

TICK_LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Route all log records to ``stream`` (stdout by default) at ``level``.

    Replaces any handlers already on the root logger, so calling it twice
    leaves a single handler. Unknown level names mean INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(TICK_LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
    return handler
