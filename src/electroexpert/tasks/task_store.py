# src/electroexpert/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from ..core.ports import CollectionStorage
from ..records.models import (
    Task,
    ValidationError,
    build_task,
    merge_input,
    new_record_id,
    task_to_dict,
)
from ..records.seeds import DEMO_TASKS
from ..storage.adapter import TASKS_KEY

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Maintenance log kept in memory and mirrored to a CollectionStorage.

    - The snapshot is read once, at construction.
    - Every mutation rewrites the whole collection (no partial writes).
    - Order is most-recent-first; edits keep the record's position.
    """

    def __init__(
        self,
        storage: CollectionStorage,
        *,
        key: str = TASKS_KEY,
        seed: bool = True,
        today: date | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._today = today
        self._tasks: list[Task] = self._load()
        if seed:
            self.seed_if_empty()
        logger.info("TaskStore ready key=%s total=%s", self._key, len(self._tasks))

    # ---- low-level helpers ----

    def _load(self) -> list[Task]:
        out: list[Task] = []
        seen: set[str] = set()
        for raw in self._storage.load(self._key):
            try:
                task = build_task(raw, today=self._today)
            except ValidationError:
                logger.warning("Dropping stored task with invalid data id=%s", raw.get("id"))
                continue
            if task.id in seen:
                logger.warning("Dropping stored task with duplicate id=%s", task.id)
                continue
            seen.add(task.id)
            out.append(task)
        return out

    def _persist(self, tasks: list[Task]) -> None:
        """Save `tasks` as the whole collection, then adopt it as the in-memory state."""
        self._storage.save(self._key, (task_to_dict(t) for t in tasks))
        self._tasks = tasks

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _fresh_id(self, taken: set[str] | None = None) -> str:
        taken = taken if taken is not None else {t.id for t in self._tasks}
        while True:
            candidate = new_record_id()
            if candidate not in taken:
                return candidate

    # ---- seeding ----

    def seed_if_empty(self, seeds: Iterable[Mapping[str, Any]] = DEMO_TASKS) -> bool:
        """Install the demo entries (dated today) when the store is empty."""
        if self._tasks:
            return False
        now = datetime.now()
        day = self._today or now.date()
        seeded: list[Task] = []
        taken: set[str] = set()
        for s in seeds:
            task = build_task({**s, "id": self._fresh_id(taken)}, today=day, now=now)
            taken.add(task.id)
            seeded.append(task)
        self._persist(seeded)
        logger.info("Seeded %d demo tasks", len(seeded))
        return True

    # ---- public API ----

    def count(self) -> int:
        return len(self._tasks)

    def list_all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def list_by_date(self, day: str) -> list[Task]:
        return [t for t in self._tasks if t.date == day]

    def search(self, query: str = "") -> list[Task]:
        """Case-insensitive substring match on title, description or category."""
        q = (query or "").lower()
        if not q:
            return list(self._tasks)
        return [
            t
            for t in self._tasks
            if q in t.title.lower() or q in t.description.lower() or q in t.category.lower()
        ]

    def upsert(self, partial: Mapping[str, Any]) -> Task:
        """
        Create or replace a task.

        - partial["id"] matching a stored task -> merge over it, keep its position
        - otherwise -> new task at the front (using partial["id"] if given)
        """
        task_id = partial.get("id") or None
        idx = self._index_of(str(task_id)) if task_id else None

        if idx is not None:
            existing = task_to_dict(self._tasks[idx])
            task = build_task(merge_input(existing, partial), today=self._today)
            updated = list(self._tasks)
            updated[idx] = task
            action = "updated"
        else:
            fields = dict(partial)
            if not task_id:
                fields["id"] = self._fresh_id()
            task = build_task(fields, today=self._today)
            updated = [task, *self._tasks]
            action = "created"

        self._persist(updated)
        logger.debug(
            "Task %s id=%s category=%s severity=%s date=%s",
            action,
            task.id,
            task.category,
            task.severity.value,
            task.date,
        )
        return task

    def remove(self, task_id: str) -> None:
        """Drop the task if present. Unknown ids are a no-op; the collection is saved either way."""
        kept = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) - len(kept)
        self._persist(kept)
        logger.debug("Task remove id=%s removed=%s", task_id, removed)
