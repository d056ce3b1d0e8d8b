"""ActionTracker - timing and lifecycle of a repeated action sequence."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gametick import PERFECT_TICK_MS

from gametick_progress.actions import (
    ACTIONS,
    SMITH_OUTFIT_MULTIPLIER,
    ActionDef,
    ActionKind,
    is_boostable_fletching,
)
from gametick_progress.inventory import FLETCHING_KNIFE, InventoryID
from gametick_progress.types import (
    ACTION_STARTED,
    ACTION_STOPPED,
    ActionStarted,
    ActionStopped,
    ActiveAction,
)

if TYPE_CHECKING:
    from gametick import Clock
    from gametick_signal import Interrupt, InterruptManager, SignalBus

    from gametick_progress.config import ProgressConfig
    from gametick_progress.inventory import ItemContainers

logger = logging.getLogger(__name__)


class ActionTracker:
    """Estimates when the current sequence of actions will finish.

    A sequence starts with ``start_action`` and ends either naturally, when
    ``on_tick`` observes the end tick, or early through ``on_interrupt``.
    Both paths emit ``ActionStopped`` on the bus. Lifecycle events are
    delivered before the call that caused them returns, so listeners never
    see a start after the matching stop.
    """

    def __init__(
        self,
        clock: Clock,
        interrupts: InterruptManager,
        config: ProgressConfig,
        inventory: ItemContainers,
        bus: SignalBus,
        actions: dict[ActionKind, ActionDef] | None = None,
    ) -> None:
        self._clock = clock
        self._interrupts = interrupts
        self.config = config
        self._inventory = inventory
        self._bus = bus
        self._actions = actions if actions is not None else ACTIONS

        self._current_action: ActionKind | None = None
        self.current_product_id = -1
        self._action_count = -1
        self._action_start_tick = -1
        self._action_end_tick = -1
        self._action_start_ms = 0
        self._action_end_ms = 0

    # --- State ---

    @property
    def current_action(self) -> ActionKind | None:
        return self._current_action

    @property
    def action_count(self) -> int:
        return self._action_count

    @property
    def action_start_tick(self) -> int:
        return self._action_start_tick

    @property
    def action_end_tick(self) -> int:
        return self._action_end_tick

    @property
    def action_start_ms(self) -> int:
        return self._action_start_ms

    @property
    def action_end_ms(self) -> int:
        return self._action_end_ms

    def is_active(self) -> bool:
        return self._current_action is not None

    def state(self) -> ActiveAction | None:
        if self._current_action is None:
            return None
        return ActiveAction(
            kind=self._current_action,
            product_id=self.current_product_id,
            count=self._action_count,
            start_tick=self._action_start_tick,
            start_ms=self._action_start_ms,
            end_tick=self._action_end_tick,
            end_ms=self._action_end_ms,
        )

    # --- Lifecycle ---

    def start_action(self, kind: ActionKind, count: int, product_id: int = -1) -> None:
        """Begin tracking ``count`` repetitions of ``kind``.

        Disabled kinds, single actions (when configured to ignore them) and
        empty requests are dropped without error. ``ActionStarted`` reaches
        subscribers before this returns.
        """
        defn = self._actions[kind]
        if not defn.enabled(self.config):
            logger.debug("Action %s is disabled", kind.name)
            return
        if count <= 1 and self.config.ignore_single_actions:
            logger.debug("Ignoring single action %s", kind.name)
            return
        if count == 0:
            logger.debug("Nothing to do for %s", kind.name)
            return

        total_ticks = self.compute_total_ticks(kind, count)
        self._current_action = kind
        self.current_product_id = product_id
        self._action_count = count
        self._action_start_tick = self._clock.tick_number
        self._action_end_tick = self._action_start_tick + total_ticks
        self._action_start_ms = self._clock.now_ms()
        self._action_end_ms = self._action_start_ms + total_ticks * PERFECT_TICK_MS
        self._interrupts.set_waiting(True)
        logger.debug(
            "Started action: %d x %s (%d -> %d)",
            count,
            kind.name,
            self._action_start_tick,
            self._action_end_tick,
        )
        self._bus.emit(
            ACTION_STARTED,
            event=ActionStarted(
                kind=kind,
                product_id=product_id,
                count=count,
                start_tick=self._action_start_tick,
                end_tick=self._action_end_tick,
            ),
        )

    def reset_action(self) -> None:
        logger.debug("Resetting action")
        if self._current_action is not None:
            self._bus.emit(
                ACTION_STOPPED,
                event=ActionStopped(
                    kind=self._current_action,
                    product_id=self.current_product_id,
                    count=self._action_count,
                    start_tick=self._action_start_tick,
                    end_tick=self._action_end_tick,
                    completed=self._clock.tick_number < self._action_end_tick,
                ),
            )
        self._current_action = None
        self.current_product_id = -1
        self._action_count = -1
        self._action_start_tick = -1
        self._action_end_tick = -1
        self._action_start_ms = 0
        self._action_end_ms = 0

    def on_tick(self) -> None:
        """Refresh the wall-clock estimate and finish an expired sequence."""
        self._action_end_ms = self._clock.now_ms() + self.approximate_completion_ms()
        if self._action_end_tick != -1 and self._clock.tick_number >= self._action_end_tick:
            logger.debug("Action end tick %d has passed", self._action_end_tick)
            if self._interrupts.is_waiting():
                self._interrupts.set_waiting(False)
            self.reset_action()

    def on_interrupt(self, interrupt: Interrupt) -> None:
        if not interrupt.consumed:
            self.reset_action()

    # --- Timing ---

    def adjusted_tick_times(self, kind: ActionKind) -> tuple[int, ...]:
        """Per-step tick times for ``kind`` given what the player carries now."""
        defn = self._actions[kind]
        original = defn.tick_times
        if not is_boostable_fletching(kind, defn):
            return original
        if not self._has_fletching_knife():
            return original

        # First cut keeps its timing, every following cut is a tick faster.
        length = max(2, len(original))
        adjusted = [original[0]]
        for i in range(1, length):
            base = original[i] if i < len(original) else original[0]
            adjusted.append(max(1, base - 1))
        return tuple(adjusted)

    def compute_total_ticks(self, kind: ActionKind, count: int) -> int:
        timings = self.adjusted_tick_times(kind)
        if self._actions[kind].outfit_multiplier:
            count = int(count * SMITH_OUTFIT_MULTIPLIER)
        total = 0
        for i in range(count):
            total += timings[i] if i < len(timings) else timings[-1]
        return total

    def current_action_processed(self) -> int:
        """Number of steps finished as of the current tick."""
        if self._current_action is None:
            return 0
        processed = 0
        rem = self._clock.tick_number - self._action_start_tick
        timings = self.adjusted_tick_times(self._current_action)
        for tick_time in timings:
            rem -= tick_time
            if rem >= 0:
                processed += 1
            else:
                rem = 0
                break
        return processed + rem // timings[-1]

    def ticks_left(self) -> float:
        ticks_left = float(self._action_end_tick - self._clock.tick_number)
        if ticks_left <= 0:
            return 0.0
        return ticks_left

    def approximate_completion_ms(self) -> int:
        """Milliseconds until the sequence ends. Rough near tick boundaries."""
        since_tick = self._clock.ms_since_last_tick()
        return round(self.ticks_left() * PERFECT_TICK_MS - since_tick)

    # --- Internal helpers ---

    def _has_fletching_knife(self) -> bool:
        return self._inventory.contains(
            InventoryID.INVENTORY, FLETCHING_KNIFE
        ) or self._inventory.contains(InventoryID.EQUIPMENT, FLETCHING_KNIFE)
