"""Progress tracking for repeated skilling actions on the tick loop."""
from gametick_progress.actions import (
    ACTIONS,
    SMITH_OUTFIT_MULTIPLIER,
    ActionDef,
    ActionKind,
    is_boostable_fletching,
)
from gametick_progress.config import ProgressConfig
from gametick_progress.inventory import FLETCHING_KNIFE, InventoryID, ItemContainers
from gametick_progress.systems import (
    INTERRUPT_PRIORITY,
    attach_tracker,
    make_interrupt_handler,
    make_progress_system,
)
from gametick_progress.tracker import ActionTracker
from gametick_progress.types import (
    ACTION_STARTED,
    ACTION_STOPPED,
    ActionStarted,
    ActionStopped,
    ActiveAction,
)

__all__ = [
    "ActionKind",
    "ActionDef",
    "ACTIONS",
    "SMITH_OUTFIT_MULTIPLIER",
    "is_boostable_fletching",
    "ProgressConfig",
    "InventoryID",
    "ItemContainers",
    "FLETCHING_KNIFE",
    "ActionTracker",
    "ActionStarted",
    "ActionStopped",
    "ActiveAction",
    "ACTION_STARTED",
    "ACTION_STOPPED",
    "INTERRUPT_PRIORITY",
    "make_progress_system",
    "make_interrupt_handler",
    "attach_tracker",
]
