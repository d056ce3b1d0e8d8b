"""Lifecycle event records published by the tracker."""
from __future__ import annotations

from dataclasses import dataclass

from gametick_progress.actions import ActionKind

ACTION_STARTED = "action_started"
ACTION_STOPPED = "action_stopped"


@dataclass(frozen=True)
class ActionStarted:
    kind: ActionKind
    product_id: int
    count: int
    start_tick: int
    end_tick: int


@dataclass(frozen=True)
class ActionStopped:
    kind: ActionKind
    product_id: int
    count: int
    start_tick: int
    end_tick: int
    completed: bool  # tick < end_tick at reset time


@dataclass(frozen=True)
class ActiveAction:
    """Read-only view of the sequence in progress."""

    kind: ActionKind
    product_id: int
    count: int
    start_tick: int
    start_ms: int
    end_tick: int
    end_ms: int
