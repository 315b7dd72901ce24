from dataclasses import dataclass


@dataclass(frozen=True)
class DoorPaintConfig:
    """Overlay colors for doors.

    Colors are RGBA; all three share the same alpha so overlays blend evenly.
    """

    closed_color: tuple[int, int, int, int] = (255, 0, 0, 192)
    opened_color: tuple[int, int, int, int] = (0, 128, 0, 192)
    can_be_opened_color: tuple[int, int, int, int] = (255, 128, 64, 192)


PAINT = DoorPaintConfig()
