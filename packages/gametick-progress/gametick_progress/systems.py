"""System and handler factories wiring an ActionTracker to the tick loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from gametick_signal import INTERRUPT

from gametick_progress.tracker import ActionTracker

if TYPE_CHECKING:
    from gametick import TickContext
    from gametick_signal import SignalBus

# Runs after every default-priority interrupt consumer.
INTERRUPT_PRIORITY = -1


def make_progress_system(tracker: ActionTracker) -> Callable[[TickContext], None]:
    """Return a system that advances the tracker once per tick."""

    def progress_system(ctx: TickContext) -> None:
        tracker.on_tick()

    return progress_system


def make_interrupt_handler(
    tracker: ActionTracker,
) -> Callable[[str, dict[str, Any]], None]:
    def interrupt_handler(signal_name: str, data: dict[str, Any]) -> None:
        tracker.on_interrupt(data["interrupt"])

    return interrupt_handler


def attach_tracker(
    bus: SignalBus, tracker: ActionTracker
) -> Callable[[str, dict[str, Any]], None]:
    """Subscribe the tracker to interrupts. Returns the handler for unsubscribe."""
    handler = make_interrupt_handler(tracker)
    bus.subscribe(INTERRUPT, handler, priority=INTERRUPT_PRIORITY)
    return handler
