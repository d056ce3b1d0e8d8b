"""Action kinds and their per-step tick timings."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable

from gametick_progress.config import ProgressConfig

# Fraction of requested actions that actually cost time while wearing
# the full smiths' uniform.
SMITH_OUTFIT_MULTIPLIER = 0.8


class ActionKind(enum.Enum):
    COOKING = enum.auto()
    COOKING_WINE = enum.auto()
    CRAFTING_LEATHER = enum.auto()
    CRAFTING_GLASSBLOWING = enum.auto()
    CRAFTING_JEWELLERY = enum.auto()
    FLETCH_CUT_BOW = enum.auto()
    FLETCH_CUT_ARROW_SHAFT = enum.auto()
    FLETCH_CUT_GEM_TIPS = enum.auto()
    FLETCH_STRING_BOW = enum.auto()
    FLETCH_ATTACH_ARROW = enum.auto()
    HERBLORE_CLEAN = enum.auto()
    HERBLORE_MIX_POTION = enum.auto()
    SMITHING = enum.auto()
    SMITHING_WITH_SMITH_OUTFIT = enum.auto()
    SMELTING = enum.auto()
    MAGIC_ENCHANT_JEWELLERY = enum.auto()
    MAGIC_SUPERHEAT = enum.auto()


@dataclass(frozen=True)
class ActionDef:
    """Timing and gating for one action kind. Not serialized."""

    tick_times: tuple[int, ...]  # per step; the last value repeats
    description: str  # category label shown to the player
    enabled: Callable[[ProgressConfig], bool]
    outfit_multiplier: bool = False  # only SMITH_OUTFIT_MULTIPLIER of the count costs time

    def __post_init__(self) -> None:
        if not self.tick_times:
            raise ValueError("tick_times must be non-empty")
        for t in self.tick_times:
            if t <= 0:
                raise ValueError(f"tick_times must be positive, got {self.tick_times}")


def _cooking(cfg: ProgressConfig) -> bool:
    return cfg.cooking


def _crafting(cfg: ProgressConfig) -> bool:
    return cfg.crafting


def _fletching(cfg: ProgressConfig) -> bool:
    return cfg.fletching


def _herblore(cfg: ProgressConfig) -> bool:
    return cfg.herblore


def _smithing(cfg: ProgressConfig) -> bool:
    return cfg.smithing


def _magic(cfg: ProgressConfig) -> bool:
    return cfg.magic


ACTIONS: dict[ActionKind, ActionDef] = {
    ActionKind.COOKING: ActionDef((4,), "Cooking", _cooking),
    ActionKind.COOKING_WINE: ActionDef((2,), "Fermenting", _cooking),
    ActionKind.CRAFTING_LEATHER: ActionDef((3,), "Crafting", _crafting),
    ActionKind.CRAFTING_GLASSBLOWING: ActionDef((3,), "Glassblowing", _crafting),
    ActionKind.CRAFTING_JEWELLERY: ActionDef((3,), "Crafting", _crafting),
    ActionKind.FLETCH_CUT_BOW: ActionDef((4, 3, 3, 3), "Cutting", _fletching),
    ActionKind.FLETCH_CUT_ARROW_SHAFT: ActionDef((3,), "Cutting", _fletching),
    ActionKind.FLETCH_CUT_GEM_TIPS: ActionDef((4, 3), "Cutting", _fletching),
    ActionKind.FLETCH_STRING_BOW: ActionDef((2,), "Stringing", _fletching),
    ActionKind.FLETCH_ATTACH_ARROW: ActionDef((1,), "Attaching", _fletching),
    ActionKind.HERBLORE_CLEAN: ActionDef((1,), "Cleaning", _herblore),
    ActionKind.HERBLORE_MIX_POTION: ActionDef((2,), "Mixing", _herblore),
    ActionKind.SMITHING: ActionDef((5,), "Smithing", _smithing),
    ActionKind.SMITHING_WITH_SMITH_OUTFIT: ActionDef(
        (5,), "Smithing", _smithing, outfit_multiplier=True
    ),
    ActionKind.SMELTING: ActionDef((4,), "Smelting", _smithing),
    ActionKind.MAGIC_ENCHANT_JEWELLERY: ActionDef((3,), "Enchanting", _magic),
    ActionKind.MAGIC_SUPERHEAT: ActionDef((2,), "Superheating", _magic),
}


def is_boostable_fletching(kind: ActionKind, defn: ActionDef) -> bool:
    """Knife-cut fletching actions, minus the gem tips."""
    return (
        "FLETCH" in kind.name
        and "TIPS" not in kind.name
        and defn.description == "Cutting"
    )
