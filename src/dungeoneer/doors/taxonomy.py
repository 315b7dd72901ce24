from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ..catalog import DoorCatalog, load_door_catalog
from ..exceptions import TaxonomyError
from ..interfaces import get_object_id
from ..kinds import DoorKind
from ..rules import OpeningRule, always_openable, never_openable
from .door import Door

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoorVariant:
    """One row of the classification table.

    Attributes:
        kind: Variant tag given to doors built from this row
        object_ids: Scene-object ids recognised as this kind
        can_open: Rule deciding whether a closed door of this kind can be opened now
    """

    kind: DoorKind
    object_ids: FrozenSet[int]
    can_open: OpeningRule


class DoorTaxonomy:
    """Ordered table mapping scene-object ids to door variants.

    Rows are kept in `DoorKind` priority order so the first matching row is
    always the highest-priority kind. `create_from_object` and
    `object_is_door` both go through `classify`, so they cannot disagree.
    """

    def __init__(self, variants: Iterable[DoorVariant]) -> None:
        rows = sorted(variants, key=lambda v: v.kind.priority)
        kinds = [v.kind for v in rows]
        if len(set(kinds)) != len(kinds):
            raise TaxonomyError(f"Duplicate door kinds in taxonomy: {[k.value for k in kinds]}")
        self._variants: Tuple[DoorVariant, ...] = tuple(rows)
        self._warn_overlaps()

    @classmethod
    def from_catalog(
        cls,
        catalog: DoorCatalog,
        rules: Optional[Mapping[DoorKind, OpeningRule]] = None,
    ) -> "DoorTaxonomy":
        """Build a taxonomy with one row per kind.

        Kinds without an injected rule fall back to `always_openable` for
        NORMAL and `never_openable` for everything else.
        """
        rules = dict(rules or {})
        variants: List[DoorVariant] = []
        for kind in DoorKind:
            default = always_openable if kind is DoorKind.NORMAL else never_openable
            variants.append(
                DoorVariant(kind=kind, object_ids=catalog.ids_for(kind), can_open=rules.get(kind, default))
            )
        return cls(variants)

    def _warn_overlaps(self) -> None:
        seen: dict[int, DoorKind] = {}
        for variant in self._variants:
            for object_id in variant.object_ids:
                if object_id in seen:
                    logger.warning(
                        "Object %s listed as both %s and %s; %s wins",
                        object_id,
                        seen[object_id].value,
                        variant.kind.value,
                        seen[object_id].value,
                    )
                else:
                    seen[object_id] = variant.kind

    @property
    def variants(self) -> Tuple[DoorVariant, ...]:
        return self._variants

    def kinds(self) -> List[DoorKind]:
        return [v.kind for v in self._variants]

    def variant(self, kind: DoorKind) -> DoorVariant:
        for v in self._variants:
            if v.kind is kind:
                return v
        raise KeyError(f"Door kind not in taxonomy: {kind.value}")

    def recognized_ids(self) -> FrozenSet[int]:
        ids: set[int] = set()
        for v in self._variants:
            ids |= v.object_ids
        return frozenset(ids)

    def with_rule(self, kind: DoorKind, rule: OpeningRule) -> "DoorTaxonomy":
        """Return a copy of this taxonomy with the opening rule of `kind` replaced."""
        self.variant(kind)
        return DoorTaxonomy(replace(v, can_open=rule) if v.kind is kind else v for v in self._variants)

    def classify(self, scene_object: Optional[object]) -> Optional[DoorVariant]:
        """Return the first variant recognising the object, or None if it is not a door."""
        if scene_object is None:
            return None
        object_id = get_object_id(scene_object)
        for v in self._variants:
            if object_id in v.object_ids:
                return v
        return None

    def create_from_object(self, position: int, scene_object: Optional[object]) -> Optional[Door]:
        """Create a new door for the object at the given slot, or None if it is not a door.

        Each call builds a fresh door; nothing is cached.
        """
        variant = self.classify(scene_object)
        if variant is None:
            return None
        door = Door(position, scene_object, variant)
        logger.debug("Classified object %s at slot %s as %s door", door.object_id, position, variant.kind.value)
        return door

    def object_is_door(self, scene_object: Optional[object]) -> bool:
        return self.classify(scene_object) is not None


@lru_cache(maxsize=1)
def default_taxonomy() -> DoorTaxonomy:
    """Taxonomy built from the embedded catalog with default opening rules."""
    return DoorTaxonomy.from_catalog(load_door_catalog())
