# src/electroexpert/storage/adapter.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..core.ports import KeyValueBackend, RawRecord

logger = logging.getLogger(__name__)

TASKS_KEY = "ee_tasks"
SCHEMATICS_KEY = "ee_user_schematics"
SETTINGS_KEY = "ee_settings"


class MemoryBackend:
    """In-process backend (tests, throwaway sessions). Values are kept as text."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read_text(self, key: str) -> str | None:
        return self._values.get(key)

    def write_text(self, key: str, text: str) -> None:
        self._values[key] = text

class JsonFileBackend:
    """
    One "<key>.json" file per key under a directory.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def read_text(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text("utf-8")

    def write_text(self, key: str, text: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(text, "utf-8")
        os.replace(tmp, path)
        with contextlib.suppress(Exception):
            os.chmod(path, 0o600)


class StorageAdapter:
    """
    Whole-collection persistence over a KeyValueBackend.

    load() never raises for missing, undecodable or malformed data: the caller gets [] and
    decides what to do (the stores re-seed).
    """

    def __init__(self, backend: KeyValueBackend) -> None:
        self._backend = backend

    def load(self, key: str) -> list[RawRecord]:
        try:
            raw = self._backend.read_text(key)
        except UnicodeDecodeError:
            logger.warning("Stored collection %r is not valid UTF-8; treating it as empty.", key)
            return []
        if raw is None or raw.strip() == "":
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored collection %r is not valid JSON; treating it as empty.", key)
            return []
        if not isinstance(data, list):
            logger.warning(
                "Stored collection %r is a %s, not a list; treating it as empty.",
                key,
                type(data).__name__,
            )
            return []

        out: list[RawRecord] = [item for item in data if isinstance(item, dict)]
        skipped = len(data) - len(out)
        if skipped:
            logger.warning("Skipped %d non-object entries in %r.", skipped, key)
        return out

    def save(self, key: str, records: Iterable[Mapping[str, Any]]) -> None:
        payload = [dict(r) for r in records]
        self._backend.write_text(key, json.dumps(payload, ensure_ascii=False))
        logger.debug("Saved %d records to %r", len(payload), key)
