"""
Door taxonomy: classification of scene objects into typed doors.

`create_from_object` and `object_is_door` use `default_taxonomy()` unless a
taxonomy with injected opening rules is passed in.
"""
from __future__ import annotations

from typing import Optional

from .door import Door
from .taxonomy import DoorTaxonomy, DoorVariant, default_taxonomy
from ..kinds import DoorKind


def create_from_object(
    position: int, scene_object: Optional[object], taxonomy: Optional[DoorTaxonomy] = None
) -> Optional[Door]:
    return (taxonomy or default_taxonomy()).create_from_object(position, scene_object)


def object_is_door(scene_object: Optional[object], taxonomy: Optional[DoorTaxonomy] = None) -> bool:
    return (taxonomy or default_taxonomy()).object_is_door(scene_object)


__all__ = [
    "Door",
    "DoorKind",
    "DoorTaxonomy",
    "DoorVariant",
    "create_from_object",
    "default_taxonomy",
    "object_is_door",
]
