# src/electroexpert/core/views.py

"""View models handed to whatever renders the app (console, web page)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..records.models import Schematic, Task

PENDING_SOLUTION = "Pendiente"
EMPTY_AGENDA_TEXT = "No hay tareas programadas para este día."


@dataclass(frozen=True, slots=True)
class AgendaItem:
    task_id: str
    title: str
    subtitle: str  # "CATEGORY • severity"
    solved: bool


@dataclass(frozen=True, slots=True)
class DailyAgenda:
    date: str
    items: tuple[AgendaItem, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True, slots=True)
class TaskCard:
    task_id: str
    severity: str
    date: str
    title: str
    description: str
    image: str | None
    solution: str


@dataclass(frozen=True, slots=True)
class SchematicCard:
    schematic_id: str
    title: str
    img: str
    badge: str


def daily_agenda(date: str, tasks: Iterable[Task]) -> DailyAgenda:
    items = tuple(
        AgendaItem(
            task_id=t.id,
            title=t.title,
            subtitle=f"{t.category.upper()} • {t.severity.value}",
            solved=t.is_solved,
        )
        for t in tasks
        if t.date == date
    )
    return DailyAgenda(date=date, items=items)


def task_card(task: Task) -> TaskCard:
    return TaskCard(
        task_id=task.id,
        severity=task.severity.value,
        date=task.date,
        title=task.title,
        description=task.description,
        image=task.image,
        solution=task.solution or PENDING_SOLUTION,
    )


def category_badge(category: str) -> str:
    # Only the first hyphen becomes a space ("clima-hvac" -> "CLIMA HVAC").
    return category.replace("-", " ", 1).upper()


def schematic_card(schematic: Schematic) -> SchematicCard:
    return SchematicCard(
        schematic_id=schematic.id,
        title=schematic.title,
        img=schematic.img,
        badge=category_badge(schematic.category),
    )
