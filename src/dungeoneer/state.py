from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Mapping, Optional

from .interfaces import InventoryProtocol, SkillsProtocol

INVENTORY_SLOTS = 28


class InventorySnapshot(InventoryProtocol):
    """Item counts from one perception read of the player's inventory.

    Snapshots are immutable; take a new one after every inventory read.
    """

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: Dict[str, int] = {k: int(v) for k, v in (counts or {}).items() if int(v) > 0}

    @classmethod
    def from_slots(cls, slots: Iterable[Optional[str]]) -> "InventorySnapshot":
        """Count item ids from the inventory slot grid; empty slots are None.

        Raises:
            ValueError: If more slots are given than the inventory holds.
        """
        slots = list(slots)
        if len(slots) > INVENTORY_SLOTS:
            raise ValueError(f"Inventory has {INVENTORY_SLOTS} slots, got {len(slots)}")
        return cls(Counter(item for item in slots if item))

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<InventorySnapshot {dict(sorted(self._counts.items()))}>"

    def get_item_count(self, item_id: str) -> int:
        return self._counts.get(item_id, 0)

    def item_ids(self) -> frozenset[str]:
        return frozenset(self._counts)


class SkillLevels(SkillsProtocol):
    """Current skill levels as read from the skills tab; unknown skills read as level 1."""

    def __init__(self, levels: Mapping[str, int] | None = None) -> None:
        self._levels: Dict[str, int] = {k.lower(): int(v) for k, v in (levels or {}).items()}

    def get_level(self, skill: str) -> int:
        return self._levels.get(skill.lower(), 1)

    def set_level(self, skill: str, level: int) -> None:
        if level < 1:
            raise ValueError("level must be at least 1")
        self._levels[skill.lower()] = int(level)
