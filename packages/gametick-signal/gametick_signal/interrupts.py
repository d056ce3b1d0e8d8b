"""Interrupt signals and the shared "waiting" advisory flag."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from gametick_signal.bus import SignalBus

logger = logging.getLogger(__name__)

INTERRUPT = "interrupt"


@dataclass
class Interrupt:
    """Something broke the player's current activity (movement, combat, ...).

    A handler that fully deals with the interrupt calls ``consume()`` so that
    lower-priority handlers can skip it.
    """

    reason: str
    consumed: bool = False

    def consume(self) -> None:
        self.consumed = True


class InterruptManager:
    """Owns the waiting flag and raises interrupts on a bus."""

    def __init__(self, bus: SignalBus) -> None:
        self._bus = bus
        self._waiting = False

    @property
    def waiting(self) -> bool:
        return self._waiting

    @waiting.setter
    def waiting(self, value: bool) -> None:
        self._waiting = value

    def set_waiting(self, value: bool) -> None:
        self._waiting = value

    def is_waiting(self) -> bool:
        return self._waiting

    def interrupt(self, reason: str) -> Interrupt:
        """Deliver an interrupt to every subscriber before returning."""
        evt = Interrupt(reason=reason)
        logger.debug("Interrupt raised: %s (waiting=%s)", reason, self._waiting)
        self._bus.emit(INTERRUPT, interrupt=evt)
        return evt
