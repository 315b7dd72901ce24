from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files as resource_files
from typing import Any, Dict, FrozenSet, Mapping, Optional

import yaml
from jsonschema import Draft202012Validator

from .exceptions import CatalogError
from .kinds import DoorKind

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "door_objects.yaml"
SCHEMA_RESOURCE = "door_objects.schema.json"


@dataclass(frozen=True)
class SkillRequirement:
    skill: str
    level: int


@dataclass(frozen=True)
class DoorCatalog:
    """Object identifiers recognised for each door kind.

    Attributes:
        object_ids: Recognised scene-object ids per kind (every kind present)
        key_requirements: Key item required by each key door object id
        skill_requirements: Skill and level required by each skill door object id
    """

    object_ids: Mapping[DoorKind, FrozenSet[int]]
    key_requirements: Mapping[int, str] = field(default_factory=dict)
    skill_requirements: Mapping[int, SkillRequirement] = field(default_factory=dict)

    def ids_for(self, kind: DoorKind) -> FrozenSet[int]:
        return self.object_ids.get(kind, frozenset())

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DoorCatalog":
        """Build a catalog from already-validated catalog data.

        Raises:
            CatalogError: If a requirement names an object id not listed under its kind.
        """
        doors = raw.get("doors") or {}
        object_ids = {kind: frozenset(int(x) for x in doors.get(kind.value, [])) for kind in DoorKind}

        key_requirements: Dict[int, str] = {}
        for entry in raw.get("key_requirements", []):
            object_id = int(entry["object_id"])
            if object_id not in object_ids[DoorKind.KEY]:
                raise CatalogError(f"Key requirement for {object_id} which is not a key door")
            key_requirements[object_id] = str(entry["key"])

        skill_requirements: Dict[int, SkillRequirement] = {}
        for entry in raw.get("skill_requirements", []):
            object_id = int(entry["object_id"])
            if object_id not in object_ids[DoorKind.SKILL]:
                raise CatalogError(f"Skill requirement for {object_id} which is not a skill door")
            skill_requirements[object_id] = SkillRequirement(
                skill=str(entry["skill"]).lower(), level=int(entry["level"])
            )

        return cls(
            object_ids=object_ids,
            key_requirements=key_requirements,
            skill_requirements=skill_requirements,
        )


@lru_cache(maxsize=1)
def _load_catalog_schema() -> Dict[str, Any]:
    """Load the catalog JSON schema shipped with the package.

    Cached since the schema is static.
    """
    text = resource_files("dungeoneer.data").joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    return json.loads(text)


def validate_catalog_dict(data: Any) -> None:
    """Validate raw catalog data against the catalog schema.

    Raises:
        CatalogError: If the data is invalid; all errors are logged first.
    """
    validator = Draft202012Validator(_load_catalog_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.error("Door catalog validation error at %s: %s", list(err.path), err.message)
        first = errors[0]
        raise CatalogError(f"Invalid door catalog at {list(first.path)}: {first.message}") from first


def load_door_catalog(path: Optional[str] = None) -> DoorCatalog:
    """Load the door object catalog from YAML.

    If path is None, loads the embedded default resource at
    dungeoneer/data/door_objects.yaml.
    """
    if path is None:
        data = resource_files("dungeoneer.data").joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8")
        logger.debug("Loaded embedded door catalog resource")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except OSError as exc:
            raise CatalogError(f"Cannot read door catalog {path}: {exc}") from exc
        logger.debug("Loaded door catalog from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Door catalog is not valid YAML: {exc}") from exc

    validate_catalog_dict(raw)
    catalog = DoorCatalog.from_dict(raw)
    logger.info(
        "Door catalog: %s",
        ", ".join(f"{kind.value}={len(catalog.ids_for(kind))}" for kind in DoorKind),
    )
    return catalog


__all__ = [
    "DoorCatalog",
    "SkillRequirement",
    "load_door_catalog",
    "validate_catalog_dict",
]
