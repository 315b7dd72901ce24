from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .compass import Compass, compass_at
from .doors import Door, DoorTaxonomy, default_taxonomy
from .exceptions import DoorNotFoundError, UnknownRoomError

logger = logging.getLogger(__name__)


@dataclass
class Room:
    """One explored cell of the dungeon and the doors found on its walls.

    Doors refer back to rooms by id only; the arena owns the rooms.
    """

    room_id: int
    location: Tuple[int, int] = (0, 0)
    doors: Dict[int, Door] = field(default_factory=dict)

    def door_at(self, position: int) -> Optional[Door]:
        return self.doors.get(position)

    def scan_doors(
        self,
        slots: Iterable[Tuple[int, Optional[object]]],
        taxonomy: Optional[DoorTaxonomy] = None,
    ) -> List[Door]:
        """Register doors for the (position, scene object) pairs of one scan.

        Slots that already hold a door are left alone so open/closed state and
        destinations survive rescans. Returns the doors created by this scan.
        """
        taxonomy = taxonomy or default_taxonomy()
        created: List[Door] = []
        for position, scene_object in slots:
            if position in self.doors:
                logger.debug("Room %s slot %s already has %s; skipping", self.room_id, position, self.doors[position])
                continue
            door = taxonomy.create_from_object(position, scene_object)
            if door is None:
                continue
            self.doors[position] = door
            created.append(door)
        if created:
            logger.debug("Room %s: found %s", self.room_id, ", ".join(str(d) for d in created))
        return created

    def closed_doors(self) -> List[Door]:
        return [d for _, d in sorted(self.doors.items()) if not d.is_open()]

    def openable_doors(self) -> List[Door]:
        """Closed doors whose opening rule currently allows opening."""
        return [d for d in self.closed_doors() if d.can_be_opened()]


class RoomArena:
    """Owns every room of the current dungeon floor, addressed by integer id."""

    def __init__(self) -> None:
        self._rooms: Dict[int, Room] = {}
        self._next_id = 0

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def create(self, location: Tuple[int, int] = (0, 0)) -> Room:
        room = Room(room_id=self._next_id, location=location)
        self._rooms[room.room_id] = room
        self._next_id += 1
        logger.debug("Created room %s at %s", room.room_id, location)
        return room

    def get(self, room_id: int) -> Room:
        try:
            return self._rooms[room_id]
        except KeyError as exc:
            raise UnknownRoomError(f"Unknown room id: {room_id}") from exc

    def find_at(self, location: Tuple[int, int]) -> Optional[Room]:
        return next((r for r in self._rooms.values() if r.location == location), None)

    def neighbour_location(self, room: Room, position: int) -> Tuple[int, int]:
        dx, dy = Compass(position).offset
        return room.location[0] + dx, room.location[1] + dy

    def link(self, room: Room, position: int, other: Room) -> Door:
        """Point the door at `position` of `room` to `other`, and back if possible.

        The facing door of `other` (opposite slot) is linked back to `room`
        when present. A slot outside 0-3 has no facing slot and links one way.

        Raises:
            DoorNotFoundError: If `room` has no door at `position`.
        """
        door = room.door_at(position)
        if door is None:
            raise DoorNotFoundError(f"Room {room.room_id} has no door at slot {position}")
        slot = compass_at(position)
        facing = None
        if slot is not None:
            facing = other.door_at(slot.opposite)
        else:
            logger.warning("Slot %s of room %s has no compass direction; not linking back", position, room.room_id)

        door.set_destination_room(other)
        if facing is not None:
            facing.set_destination_room(room)
        logger.debug(
            "Linked room %s %s to room %s (facing door: %s)", room.room_id, door, other.room_id, facing
        )
        return door
