# src/electroexpert/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend, stores and calendar into AppState.
"""

from __future__ import annotations

import logging

from ..agenda.calendar_index import CalendarView
from ..config import get_settings
from ..core.ports import KeyValueBackend
from ..core.state import AppState
from ..schematics.schematic_store import SchematicStore
from ..storage.adapter import JsonFileBackend, StorageAdapter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_dir.mkdir(parents=True, exist_ok=True)
    settings.export_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, backend: KeyValueBackend | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and backend are injectable for tests; by default the settings come
    from get_settings() and data lives in JSON files under settings.storage_dir.
    """
    if settings is None:
        settings = get_settings()

    if backend is None:
        _ensure_local_dirs(settings)
        backend = JsonFileBackend(settings.storage_dir)

    storage = StorageAdapter(backend)
    seed = bool(getattr(settings, "seed_demo_data", True))

    state = AppState(
        settings=settings,
        tasks=TaskStore(storage, seed=seed),
        schematics=SchematicStore(storage, seed=seed),
        calendar=CalendarView(),
    )
    logger.debug(
        "State ready tasks=%d schematics=%d agenda_date=%s",
        state.tasks.count(),
        state.schematics.count(),
        state.agenda_date,
    )
    return state
