# src/electroexpert/agenda/calendar_index.py

"""
Month grid computation for the agenda calendar.

Pure functions (month_grid, shift_month, format_date) plus CalendarView, a small
stateful navigator that remembers the displayed month and the selected day and
notifies listeners when the selection changes. Rendering belongs to the view layer.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date

from ..core.ports import SelectionListener
from ..records.models import parse_iso_date

logger = logging.getLogger(__name__)

MONTH_NAMES: tuple[str, ...] = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)


@dataclass(frozen=True, slots=True)
class DayCell:
    day: int
    date: str
    is_today: bool
    is_selected: bool


@dataclass(frozen=True, slots=True)
class BlankCell:
    """Padding before the 1st so that weeks start on Monday."""


CalendarCell = DayCell | BlankCell


@dataclass(frozen=True, slots=True)
class MonthGrid:
    year: int
    month: int
    label: str
    cells: tuple[CalendarCell, ...]

    @property
    def leading_blanks(self) -> int:
        n = 0
        for cell in self.cells:
            if not isinstance(cell, BlankCell):
                break
            n += 1
        return n

    @property
    def days(self) -> list[DayCell]:
        return [c for c in self.cells if isinstance(c, DayCell)]


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")


def format_date(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def month_label(year: int, month: int) -> str:
    _check_month(month)
    return f"{MONTH_NAMES[month - 1]} {year}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, rolling over year boundaries."""
    _check_month(month)
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_grid(
    year: int,
    month: int,
    *,
    selected: str | None = None,
    today: date | None = None,
) -> MonthGrid:
    """
    Build the Monday-first grid for one month.

    calendar.monthrange already reports the weekday with Monday=0, which is the
    number of blank cells needed before day 1.
    """
    _check_month(month)
    if today is None:
        today = date.today()
    today_str = today.isoformat()

    first_weekday, n_days = calendar.monthrange(year, month)

    cells: list[CalendarCell] = [BlankCell() for _ in range(first_weekday)]
    for d in range(1, n_days + 1):
        ds = format_date(year, month, d)
        cells.append(
            DayCell(
                day=d,
                date=ds,
                is_today=ds == today_str,
                is_selected=selected is not None and ds == selected,
            )
        )

    return MonthGrid(year=year, month=month, label=month_label(year, month), cells=tuple(cells))


class CalendarView:
    """
    Displayed month + selected day, with a single "selection changed" channel.

    The view layer calls render() to get a MonthGrid and select()/select_day()
    when the user clicks a day. Subscribers receive the chosen date string.
    """

    def __init__(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        selected: str | None = None,
        today: date | None = None,
    ) -> None:
        self._today = today
        start = today or date.today()
        self.year = start.year if year is None else year
        self.month = start.month if month is None else month
        _check_month(self.month)
        self.selected: str = selected or start.isoformat()
        self._listeners: list[SelectionListener] = []

    def subscribe(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def render(self) -> MonthGrid:
        return month_grid(self.year, self.month, selected=self.selected, today=self._today)

    def change_month(self, delta: int) -> MonthGrid:
        self.year, self.month = shift_month(self.year, self.month, delta)
        return self.render()

    def next_month(self) -> MonthGrid:
        return self.change_month(1)

    def prev_month(self) -> MonthGrid:
        return self.change_month(-1)

    def select(self, date_str: str) -> str:
        """Select a date (any month) and notify listeners. Returns the normalized date."""
        chosen = parse_iso_date(date_str).isoformat()
        self.selected = chosen
        logger.debug("Calendar selection -> %s", chosen)
        for listener in list(self._listeners):
            listener(chosen)
        return chosen

    def select_day(self, day: int) -> str:
        """Select a day of the displayed month."""
        _, n_days = calendar.monthrange(self.year, self.month)
        if not 1 <= day <= n_days:
            raise ValueError(f"day must be 1..{n_days} for {month_label(self.year, self.month)}")
        return self.select(format_date(self.year, self.month, day))
