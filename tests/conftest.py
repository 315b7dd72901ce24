import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from dungeoneer.catalog import DoorCatalog, SkillRequirement  # noqa: E402
from dungeoneer.kinds import DoorKind  # noqa: E402


@pytest.fixture()
def small_catalog() -> DoorCatalog:
    """A compact catalog with one overlap (900 is both GUARDIAN and KEY)."""
    return DoorCatalog(
        object_ids={
            DoorKind.NORMAL: frozenset({100, 101}),
            DoorKind.GUARDIAN: frozenset({200, 900}),
            DoorKind.BOSS: frozenset({300}),
            DoorKind.KEY: frozenset({400, 401, 900}),
            DoorKind.SKILL: frozenset({500}),
            DoorKind.PUZZLE: frozenset({600}),
        },
        key_requirements={400: "orange_triangle_key", 401: "gold_shield_key"},
        skill_requirements={500: SkillRequirement(skill="agility", level=30)},
    )
