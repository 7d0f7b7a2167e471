# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from electroexpert.cli.bootstrap import create_initial_state
from electroexpert.core.state import AppState
from electroexpert.storage.adapter import MemoryBackend, StorageAdapter

from .fakes import RecordingBackend


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="electroexpert-test",
        log_level="DEBUG",
        console_enabled=False,
        seed_demo_data=True,
        data_dir=tmp_path,
        storage_dir=tmp_path / "storage",
        export_dir=tmp_path / "exports",
        report_page_height=270,
    )


@pytest.fixture()
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture()
def storage(backend: RecordingBackend) -> StorageAdapter:
    return StorageAdapter(backend)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with an in-memory backend (seeded like a first run)."""
    return create_initial_state(settings=settings, backend=MemoryBackend())
