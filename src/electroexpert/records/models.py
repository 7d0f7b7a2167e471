# src/electroexpert/records/models.py

from __future__ import annotations

import random
import string
import time
from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any, Mapping, TypedDict


class ValidationError(ValueError):
    """Input rejected before anything is stored."""


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def parse(cls, raw: str | None) -> Severity:
        if not raw:
            return cls.MEDIUM
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.MEDIUM


# Known task categories. Anything else is accepted verbatim.
TASK_CATEGORIES: tuple[str, ...] = (
    "clima",
    "cocina",
    "piscina",
    "calentador",
    "iluminacion",
    "otros",
)

SCHEMATIC_CATEGORIES: tuple[str, ...] = (
    "clima-hvac",
    "acs-calderas",
    "spa-piscina",
    "cocina-ind",
    "cuadros-gral",
    "emergencia",
    "otros",
)

DEFAULT_CATEGORY = "otros"

_ID_ALPHABET = string.digits + string.ascii_lowercase


class TaskInput(TypedDict, total=False):
    id: str | None
    title: str | None
    description: str | None
    category: str | None
    severity: str | None
    solution: str | None
    image: str | None
    date: str | None
    timestamp: str | None


class SchematicInput(TypedDict, total=False):
    id: str | None
    title: str | None
    category: str | None
    img: str | None
    description: str | None


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    category: str
    severity: Severity
    solution: str
    image: str | None
    date: str  # YYYY-MM-DD
    timestamp: str

    @property
    def is_solved(self) -> bool:
        return bool(self.solution.strip())


@dataclass(frozen=True, slots=True)
class Schematic:
    id: str
    title: str
    category: str
    img: str
    description: str = ""


def new_record_id(now_ms: int | None = None) -> str:
    """Epoch milliseconds followed by five random base-36 characters."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(random.choices(_ID_ALPHABET, k=5))
    return f"{now_ms}{suffix}"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime("%d/%m/%Y, %H:%M:%S")


def parse_iso_date(raw: str) -> date:
    """Strict YYYY-MM-DD parsing (zero padded)."""
    text = str(raw).strip()
    if len(text) != 10:
        raise ValidationError(f"Invalid date {raw!r}; expected YYYY-MM-DD.")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(f"Invalid date {raw!r}; expected YYYY-MM-DD.") from e


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def build_task(
    partial: Mapping[str, Any],
    *,
    today: date | None = None,
    now: datetime | None = None,
) -> Task:
    """
    Fill every missing Task field with its default.

    Missing means absent, None or (for id/date/timestamp/category/severity) empty.
    Re-applying to a complete record returns an equal record.
    """
    raw_date = partial.get("date")
    if raw_date:
        task_date = parse_iso_date(raw_date).isoformat()
    else:
        task_date = (today or date.today()).isoformat()

    return Task(
        id=_text(partial.get("id")) or new_record_id(),
        title=_text(partial.get("title")),
        description=_text(partial.get("description")),
        category=_text(partial.get("category")).strip() or DEFAULT_CATEGORY,
        severity=Severity.parse(partial.get("severity")),
        solution=_text(partial.get("solution")),
        image=partial.get("image") or None,
        date=task_date,
        timestamp=_text(partial.get("timestamp")) or format_timestamp(now or datetime.now()),
    )


def build_schematic(partial: Mapping[str, Any]) -> Schematic:
    """Fill defaults for a Schematic. An empty img is rejected."""
    img = _text(partial.get("img")).strip()
    if not img:
        raise ValidationError("A schematic needs an image (img) before it can be saved.")

    return Schematic(
        id=_text(partial.get("id")) or new_record_id(),
        title=_text(partial.get("title")),
        category=_text(partial.get("category")).strip() or DEFAULT_CATEGORY,
        img=img,
        description=_text(partial.get("description")),
    )


def task_to_dict(task: Task) -> dict[str, Any]:
    data = asdict(task)
    data["severity"] = task.severity.value
    return data


def schematic_to_dict(schematic: Schematic) -> dict[str, Any]:
    return asdict(schematic)


def merge_input(existing: Mapping[str, Any], partial: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay the provided (non-None) fields of `partial` on `existing`."""
    merged = dict(existing)
    merged.update({k: v for k, v in partial.items() if v is not None})
    return merged
