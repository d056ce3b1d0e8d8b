"""gametick-signal - In-process event bus and interrupts for the tick loop."""
from __future__ import annotations

from gametick_signal.bus import SignalBus
from gametick_signal.interrupts import INTERRUPT, Interrupt, InterruptManager
from gametick_signal.systems import make_signal_system

__all__ = [
    "SignalBus",
    "Interrupt",
    "InterruptManager",
    "INTERRUPT",
    "make_signal_system",
]
