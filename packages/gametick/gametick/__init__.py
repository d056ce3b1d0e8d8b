"""gametick - A fixed-rate game tick loop in Python."""

from gametick.clock import Clock
from gametick.engine import Engine
from gametick.logging import setup_logging
from gametick.types import PERFECT_TICK_MS, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "PERFECT_TICK_MS",
    "setup_logging",
]
