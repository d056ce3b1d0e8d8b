"""Clock: game tick counter with wall-clock timestamps."""

import time
from typing import Callable

from gametick.types import PERFECT_TICK_MS, TickContext


def _wall_ms() -> int:
    return int(time.time() * 1000)


class Clock:
    def __init__(
        self, tick_ms: int = PERFECT_TICK_MS, time_fn: Callable[[], int] | None = None
    ) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self._tick_ms = tick_ms
        self._time_fn = time_fn if time_fn is not None else _wall_ms
        self._tick_number = 0
        self._last_tick_ms = self._time_fn()

    @property
    def tick_ms(self) -> int:
        return self._tick_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def last_tick_ms(self) -> int:
        """Wall-clock time (ms) at which the most recent tick was observed."""
        return self._last_tick_ms

    def now_ms(self) -> int:
        return self._time_fn()

    def ms_since_last_tick(self) -> int:
        return self._time_fn() - self._last_tick_ms

    def advance(self) -> int:
        self._tick_number += 1
        self._last_tick_ms = self._time_fn()
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            tick_ms=self._tick_ms,
            now_ms=self._last_tick_ms,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._last_tick_ms = self._time_fn()
