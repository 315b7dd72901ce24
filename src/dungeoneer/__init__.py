"""
Dungeoneer package root.

Door taxonomy and room bookkeeping for a dungeon-exploring bot. Perception
(scene scanning), pathfinding and input simulation live outside this package;
modules here only consume scene-object descriptors and stay fully testable
with unit tests.
"""

__all__ = [
    "catalog",
    "compass",
    "config",
    "doors",
    "exceptions",
    "interfaces",
    "kinds",
    "rooms",
    "rules",
    "state",
]
