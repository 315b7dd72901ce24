from enum import IntEnum
from typing import Optional, Tuple


class Compass(IntEnum):
    """Wall slots of a room, as reported by the perception layer.

    - NORTH: 0
    - EAST: 1
    - SOUTH: 2
    - WEST: 3
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def opposite(self) -> "Compass":
        """Slot of the facing door in the neighbouring room."""
        return Compass((self.value + 2) % 4)

    @property
    def offset(self) -> Tuple[int, int]:
        """Grid delta from a room to the neighbour behind this wall."""
        return {
            Compass.NORTH: (0, 1),
            Compass.EAST: (1, 0),
            Compass.SOUTH: (0, -1),
            Compass.WEST: (-1, 0),
        }[self]


def compass_at(position: int) -> Optional[Compass]:
    """Return the Compass for slots 0-3, None otherwise."""
    try:
        return Compass(position)
    except ValueError:
        return None


def compass_label(position: int) -> Optional[str]:
    """Return "North"/"East"/"South"/"West" for slots 0-3, None otherwise."""
    slot = compass_at(position)
    return slot.label if slot is not None else None
