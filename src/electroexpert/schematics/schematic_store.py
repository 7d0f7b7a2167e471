# src/electroexpert/schematics/schematic_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.ports import CollectionStorage
from ..records.models import (
    Schematic,
    ValidationError,
    build_schematic,
    merge_input,
    new_record_id,
    schematic_to_dict,
)
from ..records.seeds import DEFAULT_SCHEMATICS
from ..storage.adapter import SCHEMATICS_KEY

logger = logging.getLogger(__name__)


class SchematicStore:
    """
    Catalog of reference wiring schematics (title, category, image reference).

    Same lifecycle as TaskStore: loaded once, every mutation rewrites the whole
    collection, new entries go first. Images are opaque strings (URL or data URI).
    """

    def __init__(
        self,
        storage: CollectionStorage,
        *,
        key: str = SCHEMATICS_KEY,
        seed: bool = True,
    ) -> None:
        self._storage = storage
        self._key = key
        self._items: list[Schematic] = self._load()
        if seed:
            self.seed_if_empty()
        logger.info("SchematicStore ready key=%s total=%s", self._key, len(self._items))

    def _load(self) -> list[Schematic]:
        out: list[Schematic] = []
        seen: set[str] = set()
        for raw in self._storage.load(self._key):
            try:
                item = build_schematic(raw)
            except ValidationError:
                logger.warning("Dropping stored schematic without image id=%s", raw.get("id"))
                continue
            if item.id in seen:
                logger.warning("Dropping stored schematic with duplicate id=%s", item.id)
                continue
            seen.add(item.id)
            out.append(item)
        return out

    def _persist(self, items: list[Schematic]) -> None:
        self._storage.save(self._key, (schematic_to_dict(s) for s in items))
        self._items = items

    def _index_of(self, schematic_id: str) -> int | None:
        for i, s in enumerate(self._items):
            if s.id == schematic_id:
                return i
        return None

    def _fresh_id(self, taken: set[str] | None = None) -> str:
        taken = taken if taken is not None else {s.id for s in self._items}
        while True:
            candidate = new_record_id()
            if candidate not in taken:
                return candidate

    def seed_if_empty(self, seeds: Iterable[Mapping[str, Any]] = DEFAULT_SCHEMATICS) -> bool:
        if self._items:
            return False
        seeded: list[Schematic] = []
        taken: set[str] = set()
        for s in seeds:
            item = build_schematic({**s, "id": self._fresh_id(taken)})
            taken.add(item.id)
            seeded.append(item)
        self._persist(seeded)
        logger.info("Seeded %d default schematics", len(seeded))
        return True

    # ---- public API ----

    def count(self) -> int:
        return len(self._items)

    def list_all(self) -> list[Schematic]:
        return list(self._items)

    def get(self, schematic_id: str) -> Schematic | None:
        idx = self._index_of(schematic_id)
        return None if idx is None else self._items[idx]

    def search(self, query: str = "") -> list[Schematic]:
        """Case-insensitive substring match on title or category; empty matches all."""
        q = (query or "").lower()
        if not q:
            return list(self._items)
        return [s for s in self._items if q in s.title.lower() or q in s.category.lower()]

    def upsert(self, partial: Mapping[str, Any]) -> Schematic:
        """
        Create or replace a schematic.

        The input itself must carry a non-empty img (the image has to be captured
        before saving); otherwise ValidationError is raised and nothing changes.
        """
        if not str(partial.get("img") or "").strip():
            raise ValidationError("Capture a photo or choose an image before saving the schematic.")

        schematic_id = partial.get("id") or None
        idx = self._index_of(str(schematic_id)) if schematic_id else None

        if idx is not None:
            existing = schematic_to_dict(self._items[idx])
            item = build_schematic(merge_input(existing, partial))
            updated = list(self._items)
            updated[idx] = item
            action = "updated"
        else:
            fields = dict(partial)
            if not schematic_id:
                fields["id"] = self._fresh_id()
            item = build_schematic(fields)
            updated = [item, *self._items]
            action = "created"

        self._persist(updated)
        logger.debug("Schematic %s id=%s category=%s", action, item.id, item.category)
        return item

    def remove(self, schematic_id: str) -> None:
        kept = [s for s in self._items if s.id != schematic_id]
        removed = len(self._items) - len(kept)
        self._persist(kept)
        logger.debug("Schematic remove id=%s removed=%s", schematic_id, removed)
