"""Opening-eligibility rules for door variants.

A rule is any callable taking the door and returning whether it can be opened
right now. Rules are evaluated on every query, so they should read live game
state through the collaborators they close over rather than caching it.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from .catalog import SkillRequirement
from .interfaces import SkillsProtocol, inventory_reader

if TYPE_CHECKING:  # pragma: no cover
    from .doors.door import Door

logger = logging.getLogger(__name__)

OpeningRule = Callable[["Door"], bool]


def always_openable(door: "Door") -> bool:
    return True


def never_openable(door: "Door") -> bool:
    return False


def when(predicate: Callable[[], bool]) -> OpeningRule:
    """Wrap a zero-argument live condition (guardians slain, puzzle solved...)."""

    def rule(door: "Door") -> bool:
        return bool(predicate())

    return rule


def requires_key(source: object, key_requirements: Mapping[int, str]) -> OpeningRule:
    """Openable iff the current inventory has the key matching the door object.

    `source` is anything `inventory_reader` accepts; it is read on every query.
    """
    read_inventory = inventory_reader(source)

    def rule(door: "Door") -> bool:
        key = key_requirements.get(door.object_id)
        if key is None:
            logger.warning("No key requirement known for %s (object %s)", door, door.object_id)
            return False
        held = read_inventory().get_item_count(key)
        logger.debug("%s needs '%s'; holding %d", door, key, held)
        return held > 0

    return rule


def requires_skill(
    skills: SkillsProtocol,
    skill_requirements: Mapping[int, SkillRequirement],
    required_level: Optional[Callable[["Door", SkillRequirement], int]] = None,
) -> OpeningRule:
    """Openable iff the current level meets the door object's skill requirement.

    Catalog levels are the lowest level any floor asks for. The real level
    depends on the floor and is only known in game (e.g. from the door's
    examine text), so callers that know it pass `required_level`.
    """

    def rule(door: "Door") -> bool:
        requirement = skill_requirements.get(door.object_id)
        if requirement is None:
            logger.warning("No skill requirement known for %s (object %s)", door, door.object_id)
            return False
        needed = required_level(door, requirement) if required_level is not None else requirement.level
        level = skills.get_level(requirement.skill)
        logger.debug("%s needs %s %d; current level %d", door, requirement.skill, needed, level)
        return level >= needed

    return rule
