# src/electroexpert/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The stores depend on Protocols instead of concrete implementations.
This keeps the key-value backend swappable (file, memory) and makes testing easier.
"""

from typing import Any, Callable, Iterable, Mapping, Protocol

from ..records.models import Schematic, Task

RawRecord = dict[str, Any]
# Plain JSON-compatible dict, as persisted.

SelectionListener = Callable[[str], None]
# Receives the selected date as "YYYY-MM-DD".


class KeyValueBackend(Protocol):
    """Whole-value text storage addressed by a fixed key (localStorage-like)."""

    def read_text(self, key: str) -> str | None: ...
    def write_text(self, key: str, text: str) -> None: ...


class CollectionStorage(Protocol):
    """Whole-collection load/save used by the stores."""

    def load(self, key: str) -> list[RawRecord]: ...
    def save(self, key: str, records: Iterable[Mapping[str, Any]]) -> None: ...


class TaskRepo(Protocol):
    """Maintenance log as seen by the session state and the console commands."""

    def count(self) -> int: ...
    def list_all(self) -> list[Task]: ...
    def list_by_date(self, day: str) -> list[Task]: ...
    def search(self, query: str = "") -> list[Task]: ...
    def get(self, task_id: str) -> Task | None: ...
    def upsert(self, partial: Mapping[str, Any]) -> Task: ...
    def remove(self, task_id: str) -> None: ...


class SchematicRepo(Protocol):
    def count(self) -> int: ...
    def list_all(self) -> list[Schematic]: ...
    def search(self, query: str = "") -> list[Schematic]: ...
    def get(self, schematic_id: str) -> Schematic | None: ...
    def upsert(self, partial: Mapping[str, Any]) -> Schematic: ...
    def remove(self, schematic_id: str) -> None: ...
