"""In-memory pub/sub event bus with per-tick flush and subscriber priority."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals and delivers them on ``flush()``.

    Handlers for a signal run in descending priority order. Handlers with
    equal priority run in subscription order.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[tuple[int, _Handler]]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler, priority: int = 0) -> None:
        handlers = self._subscribers.setdefault(signal_name, [])
        index = len(handlers)
        for i, (existing, _) in enumerate(handlers):
            if priority > existing:
                index = i
                break
        handlers.insert(index, (priority, handler))

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        for i, (_, existing) in enumerate(handlers):
            if existing == handler:
                del handlers[i]
                return

    def publish(self, signal_name: str, **data: Any) -> None:
        """Queue a signal for the next ``flush()``."""
        self._queue.append((signal_name, data))

    def emit(self, signal_name: str, **data: Any) -> None:
        """Deliver a signal to its subscribers now, bypassing the queue."""
        self._dispatch(signal_name, data)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            self._dispatch(signal_name, data)

    def _dispatch(self, signal_name: str, data: dict[str, Any]) -> None:
        for _, handler in list(self._subscribers.get(signal_name, [])):
            handler(signal_name, data)

    def pending(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()
