class DungeoneerError(Exception):
    """Base exception for the Dungeoneer project."""


class CatalogError(DungeoneerError):
    """Raised when a door object catalog cannot be loaded or is invalid."""


class TaxonomyError(DungeoneerError):
    """Raised when a door taxonomy is built from inconsistent variants."""


class UnknownRoomError(DungeoneerError, KeyError):
    """Raised when a room id is not present in the arena."""


class DoorNotFoundError(DungeoneerError):
    """Raised when a room has no door on the requested slot."""
