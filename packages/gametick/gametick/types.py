"""Shared type aliases and constants for the game tick loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Nominal server tick length. Real ticks drift around this value.
PERFECT_TICK_MS = 600


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    tick_ms: int
    now_ms: int
    request_stop: Callable[[], None]


System = Callable[[TickContext], None]
