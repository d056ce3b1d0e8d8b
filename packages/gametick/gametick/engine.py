"""Engine - ordered per-tick dispatch over a game Clock."""

import logging
from typing import Callable

from gametick.clock import Clock
from gametick.types import PERFECT_TICK_MS, System

logger = logging.getLogger(__name__)


class Engine:
    """Runs registered systems once per game tick, in registration order.

    Registration order is the dispatch order: a system added earlier always
    sees the tick before one added later. The host decides when a tick has
    happened and calls ``step()``; the engine does no pacing of its own.
    """

    def __init__(
        self,
        tick_ms: int = PERFECT_TICK_MS,
        time_fn: Callable[[], int] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock if clock is not None else Clock(tick_ms, time_fn)
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> int:
        """Advance one tick and dispatch it. Returns the new tick number."""
        self._stop_requested = False
        tick = self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                logger.debug("Stop requested during tick %d", tick)
                break
        return tick

    def run(self, n: int) -> int:
        """Step up to ``n`` ticks, ending early on a stop request."""
        for _ in range(n):
            self.step()
            if self._stop_requested:
                break
        return self._clock.tick_number
