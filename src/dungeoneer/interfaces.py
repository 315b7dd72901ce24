from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Tuple


class SceneObjectProtocol(Protocol):
    """Descriptor of a physical object reported by the perception layer.

    Doors only read the identifier; the location is for overlay collaborators.
    """

    @property
    def id(self) -> int:  # pragma: no cover - type contract
        ...


@dataclass(frozen=True)
class SceneObject:
    """Plain scene-object descriptor for callers without their own wrapper."""

    id: int
    location: Tuple[int, int, int] = (0, 0, 0)


def get_object_id(obj: object) -> int:
    """Read the numeric identifier of a scene object.

    Supports two styles:
    - The object exposes an integer `id` attribute
    - The object exposes a `get_id()` method (client API wrappers)

    Raises:
        TypeError: If no identifier can be found.
    """
    object_id = getattr(obj, "id", None)
    if isinstance(object_id, int):
        return object_id

    getter = getattr(obj, "get_id", None)
    if callable(getter):
        return int(getter())

    raise TypeError(f"Object {obj!r} exposes neither an integer 'id' nor 'get_id()'.")


class InventoryProtocol(Protocol):
    """Read-only view of the items the player currently holds."""

    def get_item_count(self, item_id: str) -> int:
        """Return the count of the item currently held.

        Args:
            item_id: Unique identifier for the item type (e.g., "gold_crescent_key").
        """


class SkillsProtocol(Protocol):
    """Read-only view of the player's current skill levels."""

    def get_level(self, skill: str) -> int:
        """Return the current (boosted or drained) level of a skill."""


def inventory_reader(source: object) -> Callable[[], InventoryProtocol]:
    """Return a callable giving the player's current inventory.

    Inventory snapshots are replaced after every perception read, so rules
    must not hold on to one. Accepted sources:
    - a zero-argument callable returning the current inventory
    - an object whose `.inventory` attribute holds the current inventory
      (re-read on every call)
    - an inventory itself, for a fixed view

    Raises:
        TypeError: If the source matches none of these.
    """
    if hasattr(source, "get_item_count"):
        return lambda: source  # type: ignore[return-value]

    if hasattr(source, "inventory"):
        return lambda: getattr(source, "inventory")

    if callable(source):
        return source  # type: ignore[return-value]

    raise TypeError(
        f"Object {source!r} is not an inventory, an inventory holder, or a callable returning one."
    )
