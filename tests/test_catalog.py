from pathlib import Path

import pytest

from dungeoneer.catalog import SkillRequirement, load_door_catalog, validate_catalog_dict
from dungeoneer.exceptions import CatalogError
from dungeoneer.kinds import DoorKind


def write_yaml(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_embedded_catalog_loads():
    catalog = load_door_catalog()
    for kind in DoorKind:
        assert catalog.ids_for(kind)
    # every key/skill door has a requirement
    assert set(catalog.key_requirements) == set(catalog.ids_for(DoorKind.KEY))
    assert set(catalog.skill_requirements) == set(catalog.ids_for(DoorKind.SKILL))


def test_embedded_catalog_kinds_are_disjoint():
    catalog = load_door_catalog()
    seen = set()
    for kind in DoorKind:
        ids = catalog.ids_for(kind)
        assert not (seen & ids)
        seen |= ids


def test_load_from_path_with_missing_kinds(tmp_path: Path):
    path = write_yaml(
        tmp_path / "doors.yaml",
        """
doors:
  normal: [1, 2]
  skill: [5]
skill_requirements:
  - {object_id: 5, skill: Mining, level: 40}
""",
    )
    catalog = load_door_catalog(path)
    assert catalog.ids_for(DoorKind.NORMAL) == frozenset({1, 2})
    assert catalog.ids_for(DoorKind.BOSS) == frozenset()
    assert catalog.skill_requirements[5] == SkillRequirement(skill="mining", level=40)
    assert catalog.key_requirements == {}


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(CatalogError):
        load_door_catalog(str(tmp_path / "nope.yaml"))


def test_invalid_yaml_raises(tmp_path: Path):
    path = write_yaml(tmp_path / "bad.yaml", "doors: [unclosed\n")
    with pytest.raises(CatalogError):
        load_door_catalog(path)


def test_schema_violation_raises(tmp_path: Path, caplog):
    path = write_yaml(tmp_path / "bad.yaml", "doors:\n  normal: [one, two]\n")
    with pytest.raises(CatalogError) as ei:
        load_door_catalog(path)
    assert "Invalid door catalog" in str(ei.value)
    assert any("validation error" in rec.getMessage() for rec in caplog.records)


def test_unknown_kind_rejected():
    with pytest.raises(CatalogError):
        validate_catalog_dict({"doors": {"trapdoor": [1]}})


def test_empty_document_rejected(tmp_path: Path):
    path = write_yaml(tmp_path / "empty.yaml", "")
    with pytest.raises(CatalogError):
        load_door_catalog(path)


def test_requirement_for_wrong_kind_rejected(tmp_path: Path):
    path = write_yaml(
        tmp_path / "doors.yaml",
        """
doors:
  normal: [1]
  key: [2]
key_requirements:
  - {object_id: 1, key: blue_pentagon_key}
""",
    )
    with pytest.raises(CatalogError):
        load_door_catalog(path)


def test_skill_requirement_for_wrong_kind_rejected(tmp_path: Path):
    path = write_yaml(
        tmp_path / "doors.yaml",
        """
doors:
  key: [2]
  skill: [3]
key_requirements:
  - {object_id: 2, key: blue_pentagon_key}
skill_requirements:
  - {object_id: 2, skill: mining, level: 10}
""",
    )
    with pytest.raises(CatalogError) as ei:
        load_door_catalog(path)
    assert "not a skill door" in str(ei.value)
