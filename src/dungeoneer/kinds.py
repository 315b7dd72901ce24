from enum import Enum


class DoorKind(Enum):
    """Door variants, declared in classification priority order.

    When an object id is listed under several kinds, the kind declared first
    wins.
    """

    NORMAL = "normal"
    GUARDIAN = "guardian"
    BOSS = "boss"
    KEY = "key"
    SKILL = "skill"
    PUZZLE = "puzzle"

    @property
    def priority(self) -> int:
        return list(DoorKind).index(self)
