"""Progress tracking configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class ProgressConfig:
    """Immutable configuration for action progress tracking.

    Attributes:
        ignore_single_actions: Do not track sequences of one action.
        cooking: Track cooking actions.
        crafting: Track crafting actions (leather, glassblowing, jewellery).
        fletching: Track fletching actions.
        herblore: Track herblore actions.
        smithing: Track smithing and smelting actions.
        magic: Track repeated spell casts (enchanting, superheating).
    """

    ignore_single_actions: bool = True
    cooking: bool = True
    crafting: bool = True
    fletching: bool = True
    herblore: bool = True
    smithing: bool = True
    magic: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProgressConfig:
        """Build a config from a plain mapping. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: bool(v) for k, v in data.items() if k in known})
