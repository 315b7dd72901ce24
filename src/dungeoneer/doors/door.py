from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from ..compass import compass_label
from ..config import PAINT, DoorPaintConfig
from ..interfaces import get_object_id
from ..kinds import DoorKind

if TYPE_CHECKING:  # pragma: no cover
    from ..rooms import Room, RoomArena
    from .taxonomy import DoorVariant

logger = logging.getLogger(__name__)


class Door:
    """A door on one wall of a dungeon room.

    Doors are created by `DoorTaxonomy.create_from_object` when the perception
    layer reports a recognised scene object in a room slot. The door starts
    closed; navigation code calls `open()` after the bot actually got through.

    Whether a closed door can be opened right now is delegated to the variant's
    opening rule and re-evaluated on every call.
    """

    def __init__(
        self,
        position: int,
        scene_object: object,
        variant: "DoorVariant",
        paint: DoorPaintConfig = PAINT,
    ) -> None:
        self._position = position
        self._object = scene_object
        self._object_id = get_object_id(scene_object)
        self._variant = variant
        self._paint = paint
        self.destination_room_id: Optional[int] = None
        self._opened = False

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        state = "open" if self._opened else "closed"
        return (
            f"<Door pos={self._position} kind={self.kind.value} object={self._object_id} "
            f"state={state} leads_to={self.destination_room_id}>"
        )

    def __str__(self) -> str:
        return f"{self.compass_position} Door"

    @property
    def position(self) -> int:
        """Slot of this door in its room (0 = North, 1 = East, 2 = South, 3 = West)."""
        return self._position

    @property
    def compass_position(self) -> Optional[str]:
        """Compass name of the slot, or None for a slot outside 0-3."""
        return compass_label(self._position)

    @property
    def scene_object(self) -> object:
        return self._object

    @property
    def object_id(self) -> int:
        return self._object_id

    @property
    def variant(self) -> "DoorVariant":
        return self._variant

    @property
    def kind(self) -> DoorKind:
        return self._variant.kind

    def get_destination_room(self, rooms: "RoomArena") -> Optional["Room"]:
        """Resolve the room this door leads to, or None while unresolved."""
        if self.destination_room_id is None:
            return None
        return rooms.get(self.destination_room_id)

    def set_destination_room(self, room: "Room") -> None:
        """Record the room behind this door. No spatial consistency check."""
        self.destination_room_id = room.room_id

    def is_open(self) -> bool:
        return self._opened

    def open(self) -> None:
        """Mark the door as opened. Opening twice changes nothing."""
        if not self._opened:
            logger.info("%s (%s, object %s) opened", self, self.kind.value, self._object_id)
        self._opened = True

    def can_be_opened(self) -> bool:
        return bool(self._variant.can_open(self))

    def color(self) -> Tuple[int, int, int, int]:
        """Overlay color: opened, else can-be-opened, else closed."""
        if self._opened:
            return self._paint.opened_color
        if self.can_be_opened():
            return self._paint.can_be_opened_color
        return self._paint.closed_color
