# src/electroexpert/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..agenda.calendar_index import CalendarView
from .ports import SchematicRepo, TaskRepo
from .views import DailyAgenda, daily_agenda


@dataclass
class AppState:
    """
    One session: settings, both stores, the calendar and the agenda date.

    Built once by the composition root (cli/bootstrap.py) and passed to every
    consumer; nothing here is a module-level singleton.
    """

    settings: object

    tasks: TaskRepo
    schematics: SchematicRepo
    calendar: CalendarView

    agenda_date: str = field(default="")

    def __post_init__(self) -> None:
        if not self.agenda_date:
            self.agenda_date = self.calendar.selected
        self.calendar.subscribe(self._on_date_selected)

    def _on_date_selected(self, date_str: str) -> None:
        self.agenda_date = date_str

    def agenda(self) -> DailyAgenda:
        return daily_agenda(self.agenda_date, self.tasks.list_by_date(self.agenda_date))
