"""Item containers the tracker inspects for timing modifiers."""
from __future__ import annotations

import enum
from collections import Counter
from typing import Iterable

FLETCHING_KNIFE = 31043


class InventoryID(enum.Enum):
    INVENTORY = 93
    EQUIPMENT = 94


class ItemContainers:
    """Snapshot of the player's item containers, keyed by InventoryID.

    A container that has never been loaded is absent, and every lookup
    against it answers False.
    """

    def __init__(self) -> None:
        self._containers: dict[InventoryID, Counter[int]] = {}

    def set_items(self, container: InventoryID, item_ids: Iterable[int]) -> None:
        self._containers[container] = Counter(item_ids)

    def add(self, container: InventoryID, item_id: int, quantity: int = 1) -> None:
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        self._containers.setdefault(container, Counter())[item_id] += quantity

    def remove(self, container: InventoryID, item_id: int, quantity: int = 1) -> None:
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")
        items = self._containers.get(container)
        if items is None:
            return
        items[item_id] -= quantity
        if items[item_id] <= 0:
            del items[item_id]

    def clear(self, container: InventoryID | None = None) -> None:
        if container is None:
            self._containers.clear()
        else:
            self._containers.pop(container, None)

    def is_loaded(self, container: InventoryID) -> bool:
        return container in self._containers

    def contains(self, container: InventoryID, item_id: int) -> bool:
        items = self._containers.get(container)
        if items is None:
            return False
        return items[item_id] > 0
