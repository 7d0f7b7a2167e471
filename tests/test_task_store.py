# tests/test_task_store.py

from __future__ import annotations

import json

import pytest

from electroexpert.records.models import (
    TASK_CATEGORIES,
    Severity,
    ValidationError,
    build_task,
    task_to_dict,
)
from electroexpert.storage.adapter import TASKS_KEY, StorageAdapter
from electroexpert.tasks.task_store import TaskStore

from .fakes import FIXED_TODAY, FailingBackend, RecordingBackend


def _store(storage: StorageAdapter, **kwargs) -> TaskStore:
    return TaskStore(storage, today=FIXED_TODAY, **kwargs)


def test_empty_store_is_seeded_and_persisted(storage: StorageAdapter, backend: RecordingBackend) -> None:
    store = _store(storage)

    tasks = store.list_all()
    assert len(tasks) == 10
    assert {t.category for t in tasks} == set(TASK_CATEGORIES)
    assert len({t.id for t in tasks}) == 10
    assert all(t.date == FIXED_TODAY.isoformat() for t in tasks)
    assert tasks[0].title == "Hab 101 - Fuga Agua AC"

    assert backend.writes_for(TASKS_KEY) == 1
    assert len(storage.load(TASKS_KEY)) == 10


def test_non_empty_store_is_not_seeded(storage: StorageAdapter, backend: RecordingBackend) -> None:
    storage.save(TASKS_KEY, [{"id": "t1", "title": "Existing", "date": "2024-01-02"}])
    writes_before = len(backend.writes)

    store = _store(storage)
    assert [t.id for t in store.list_all()] == ["t1"]
    assert store.seed_if_empty() is False
    assert len(backend.writes) == writes_before


def test_seeding_can_be_disabled(storage: StorageAdapter) -> None:
    store = _store(storage, seed=False)
    assert store.list_all() == []
    assert store.seed_if_empty() is True
    assert store.count() == 10


def test_corrupt_snapshot_triggers_reseed() -> None:
    backend = RecordingBackend({TASKS_KEY: "[{broken"})
    store = _store(StorageAdapter(backend))
    assert store.count() == 10
    assert len(json.loads(backend.read_text(TASKS_KEY) or "[]")) == 10


def test_upsert_creates_at_front_with_defaults(storage: StorageAdapter, backend: RecordingBackend) -> None:
    store = _store(storage)
    writes_before = backend.writes_for(TASKS_KEY)

    task = store.upsert({"title": "Hab 305 - Termostato"})

    listed = store.list_all()
    assert listed[0] == task
    assert [t.id for t in listed].count(task.id) == 1
    assert task.category == "otros"
    assert task.severity is Severity.MEDIUM
    assert task.solution == ""
    assert task.image is None
    assert task.date == FIXED_TODAY.isoformat()
    assert backend.writes_for(TASKS_KEY) == writes_before + 1
    assert storage.load(TASKS_KEY)[0]["id"] == task.id


def test_upsert_with_unknown_id_creates_with_that_id(storage: StorageAdapter) -> None:
    store = _store(storage, seed=False)
    task = store.upsert({"id": "abc", "title": "Nuevo"})
    assert task.id == "abc"
    assert store.get("abc") == task


def test_upsert_existing_merges_and_keeps_position(storage: StorageAdapter) -> None:
    store = _store(storage)
    target = store.list_all()[3]

    updated = store.upsert({"id": target.id, "severity": "low", "solution": "", "image": None})

    assert store.list_all()[3] == updated
    assert store.count() == 10
    assert updated.title == target.title
    assert updated.description == target.description
    assert updated.severity is Severity.LOW
    assert updated.solution == ""
    assert updated.timestamp == target.timestamp
    assert updated.date == target.date


def test_upsert_with_bad_date_changes_nothing(storage: StorageAdapter, backend: RecordingBackend) -> None:
    store = _store(storage)
    before = store.list_all()
    writes_before = len(backend.writes)

    with pytest.raises(ValidationError):
        store.upsert({"title": "x", "date": "2024-13-01"})
    with pytest.raises(ValidationError):
        store.upsert({"id": before[0].id, "date": "15/01/2024"})

    assert store.list_all() == before
    assert len(backend.writes) == writes_before


def test_remove_is_idempotent(storage: StorageAdapter, backend: RecordingBackend) -> None:
    store = _store(storage)
    victim = store.list_all()[2]

    store.remove(victim.id)
    once = store.list_all()
    store.remove(victim.id)

    assert store.list_all() == once
    assert store.count() == 9
    assert store.get(victim.id) is None
    # a no-op delete still rewrites the collection
    assert backend.writes_for(TASKS_KEY) == 3
    assert len(storage.load(TASKS_KEY)) == 9


def test_list_by_date_is_an_ordered_subset(storage: StorageAdapter) -> None:
    store = _store(storage, seed=False)
    a = store.upsert({"title": "a", "date": "2024-01-10"})
    b = store.upsert({"title": "b", "date": "2024-01-11"})
    c = store.upsert({"title": "c", "date": "2024-01-10"})

    assert store.list_by_date("2024-01-10") == [c, a]
    assert store.list_by_date("2024-01-11") == [b]
    assert store.list_by_date("2030-01-01") == []
    for day in ("2024-01-10", "2024-01-11"):
        assert store.list_by_date(day) == [t for t in store.list_all() if t.date == day]


def test_search_is_case_insensitive_across_fields(storage: StorageAdapter) -> None:
    store = _store(storage)

    assert [t.title for t in store.search("PISCINA")] == ["Piscina - Ajuste pH/Cloro"]
    assert [t.title for t in store.search("presostato")] == ["Calentador Central - Error E04"]
    # category match
    assert {t.category for t in store.search("iluminac")} == {"iluminacion"}
    assert store.search("") == store.list_all()
    assert store.search("nada que ver") == []


def test_snapshot_survives_a_new_session(storage: StorageAdapter) -> None:
    first = _store(storage)
    first.upsert({"title": "Persisted", "category": "clima", "severity": "critical"})

    second = _store(storage)
    assert second.list_all() == first.list_all()


def test_seeded_records_rebuild_unchanged(storage: StorageAdapter) -> None:
    store = _store(storage)
    for task in store.list_all():
        assert build_task(task_to_dict(task), today=FIXED_TODAY) == task
    for raw in storage.load(TASKS_KEY):
        assert task_to_dict(build_task(raw)) == raw


def test_failed_save_leaves_store_unchanged() -> None:
    backend = FailingBackend()
    store = _store(StorageAdapter(backend))
    before = store.list_all()
    backend.fail = True

    with pytest.raises(OSError):
        store.upsert({"title": "x"})
    with pytest.raises(OSError):
        store.upsert({"id": before[0].id, "severity": "critical"})
    with pytest.raises(OSError):
        store.remove(before[1].id)

    assert store.list_all() == before
    assert store.count() == 10

    backend.fail = False
    store.upsert({"title": "x"})
    assert store.count() == 11
    assert len(StorageAdapter(backend).load(TASKS_KEY)) == 11
