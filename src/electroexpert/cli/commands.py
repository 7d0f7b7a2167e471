# src/electroexpert/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from pathlib import Path
from typing import cast

from ..agenda.calendar_index import DayCell, MonthGrid
from ..core.state import AppState
from ..core.views import EMPTY_AGENDA_TEXT, schematic_card, task_card
from ..records.models import (
    SCHEMATIC_CATEGORIES,
    TASK_CATEGORIES,
    Severity,
    Task,
    ValidationError,
)
from ..report.generator import build_report, write_text_report

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

TASK_FIELDS = ("title", "description", "category", "severity", "solution", "image", "date")
SCHEMATIC_FIELDS = ("title", "category", "img", "description")


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command arg key="quoted value"'.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValidationError as e:
            return f"Not saved: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_fields(args: list[str], allowed: tuple[str, ...]) -> dict[str, str]:
    """Turn ["title=Hab 101", "severity=high"] into a dict; unknown keys are rejected."""
    out: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        key = key.strip().lower()
        if not sep or key not in allowed:
            raise ValidationError(
                f"expected key=value with key in {', '.join(allowed)} (got {arg!r})."
            )
        out[key] = value
    return out


def _format_task_line(i: int, task: Task) -> str:
    card = task_card(task)
    return (
        f"{i}. [{card.severity}] {card.title} ({card.date}) id={card.task_id}\n"
        f"     {card.description}\n"
        f"     Solución: {card.solution}"
    )


def format_month(grid: MonthGrid) -> str:
    lines = [grid.label.center(27), " Lu  Ma  Mi  Ju  Vi  Sá  Do"]
    row: list[str] = []
    for cell in grid.cells:
        if isinstance(cell, DayCell):
            mark = "*" if cell.is_selected else ("!" if cell.is_today else " ")
            row.append(f"{cell.day:>3}{mark}")
        else:
            row.append("    ")
        if len(row) == 7:
            lines.append("".join(row).rstrip())
            row = []
    if row:
        lines.append("".join(row).rstrip())
    lines.append("(* selected, ! today)")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    storage_dir = getattr(state.settings, "storage_dir", "(memory)")
    return (
        "Status:\n"
        f"  Tasks: {state.tasks.count()}\n"
        f"  Schematics: {state.schematics.count()}\n"
        f"  Agenda date: {state.agenda_date}\n"
        f"  Storage: {storage_dir}"
    )


def cmd_tasks(state: AppState, args: list[str]) -> str:
    """
    /tasks          -> every task, most recent first
    /tasks <query>  -> title/description/category search
    """
    query = " ".join(args)
    found = state.tasks.search(query)
    if not found:
        return f"No tasks match {query!r}."
    return "\n".join(_format_task_line(i, t) for i, t in enumerate(found, start=1))


def cmd_day(state: AppState, args: list[str]) -> str:
    """
    /day              -> agenda for the selected date
    /day YYYY-MM-DD   -> select that date, then show its agenda
    """
    if args:
        try:
            state.calendar.select(args[0])
        except ValueError as e:
            return str(e)
    agenda = state.agenda()
    lines = [f"Agenda {agenda.date}:"]
    if agenda.is_empty:
        lines.append(f"  {EMPTY_AGENDA_TEXT}")
    for item in agenda.items:
        mark = "x" if item.solved else " "
        lines.append(f"  [{mark}] {item.title} - {item.subtitle} (id={item.task_id})")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add title="..." category=clima severity=high description="..." solution="..." """
    fields = parse_fields(args, TASK_FIELDS)
    if not fields.get("title", "").strip():
        severities = "|".join(s.value for s in Severity)
        categories = "|".join(TASK_CATEGORIES)
        return f"Usage: /add title=\"...\" [category={categories}] [severity={severities}] ..."
    fields.setdefault("date", state.agenda_date)
    task = state.tasks.upsert(fields)
    return f"Task saved: {task.title} ({task.date}) id={task.id}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> key=value ..."""
    if not args:
        return "Usage: /edit <id> key=value ..."
    task_id, rest = args[0], args[1:]
    if state.tasks.get(task_id) is None:
        return f"No task with id={task_id}."
    fields = parse_fields(rest, TASK_FIELDS)
    task = state.tasks.upsert({**fields, "id": task_id})
    return f"Task updated: {task.title} [{task.severity.value}] id={task.id}"


def cmd_del(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /del <id>"
    state.tasks.remove(args[0])
    return f"Task {args[0]} deleted (if it existed)."


def cmd_cal(state: AppState, args: list[str]) -> str:
    return format_month(state.calendar.render())


def cmd_next(state: AppState, args: list[str]) -> str:
    return format_month(state.calendar.next_month())


def cmd_prev(state: AppState, args: list[str]) -> str:
    return format_month(state.calendar.prev_month())


def cmd_pick(state: AppState, args: list[str]) -> str:
    """
    /pick <day>         -> day of the displayed month
    /pick YYYY-MM-DD    -> any date
    """
    if not args:
        return "Usage: /pick <day> | /pick YYYY-MM-DD"
    raw = args[0]
    try:
        if raw.isdigit():
            state.calendar.select_day(int(raw))
        else:
            state.calendar.select(raw)
    except ValueError as e:
        return f"Cannot select {raw!r}: {e}"
    return cmd_day(state, [])


def cmd_schem(state: AppState, args: list[str]) -> str:
    query = " ".join(args)
    found = state.schematics.search(query)
    if not found:
        return f"No schematics match {query!r}."
    lines = []
    for i, s in enumerate(found, start=1):
        card = schematic_card(s)
        lines.append(f"{i}. {card.title} [{card.badge}] id={card.schematic_id}\n     {card.img}")
    return "\n".join(lines)


def cmd_schem_add(state: AppState, args: list[str]) -> str:
    """/schem-add title="..." category=clima-hvac img=<url or data uri>"""
    if not args:
        categories = "|".join(SCHEMATIC_CATEGORIES)
        return f"Usage: /schem-add title=\"...\" category={categories} img=<url or data uri>"
    fields = parse_fields(args, SCHEMATIC_FIELDS)
    item = state.schematics.upsert(fields)
    return f"Schematic saved: {item.title} id={item.id}"


def cmd_schem_edit(state: AppState, args: list[str]) -> str:
    """/schem-edit <id> img=... [title=...] [category=...]"""
    if not args:
        return "Usage: /schem-edit <id> img=... [title=...] [category=...]"
    schematic_id, rest = args[0], args[1:]
    if state.schematics.get(schematic_id) is None:
        return f"No schematic with id={schematic_id}."
    fields = parse_fields(rest, SCHEMATIC_FIELDS)
    item = state.schematics.upsert({**fields, "id": schematic_id})
    return f"Schematic updated: {item.title} id={item.id}"


def cmd_schem_del(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /schem-del <id>"
    state.schematics.remove(args[0])
    return f"Schematic {args[0]} deleted (if it existed)."


def cmd_export(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    page_height = int(getattr(state.settings, "report_page_height", 270))
    export_dir = Path(getattr(state.settings, "export_dir", "."))
    if emit:
        emit(f"[EXPORT] Laying out {state.tasks.count()} tasks...")
    layout = build_report(state.tasks.list_all(), page_height=page_height)
    path = write_text_report(layout, export_dir)
    logger.debug("Export done pages=%d path=%s", layout.page_count, path)
    return f"Report written to {path} ({layout.page_count} pages)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show counts, agenda date and storage path.")
registry.register("tasks", cmd_tasks, help_text="List tasks or search them: /tasks [query].")
registry.register("day", cmd_day, help_text="Daily agenda: /day [YYYY-MM-DD].")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task on the agenda date: /add title=... category=... severity=...",
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> key=value ...")
registry.register("del", cmd_del, help_text="Delete a task: /del <id>.")
registry.register("cal", cmd_cal, help_text="Show the displayed month.")
registry.register("next", cmd_next, help_text="Show the next month.")
registry.register("prev", cmd_prev, help_text="Show the previous month.")
registry.register("pick", cmd_pick, help_text="Select a day: /pick <day> | /pick YYYY-MM-DD.")
registry.register("schem", cmd_schem, help_text="List or search schematics: /schem [filter].")
registry.register(
    "schem-add", cmd_schem_add, help_text="Add a schematic: /schem-add title=... img=..."
)
registry.register(
    "schem-edit", cmd_schem_edit, help_text="Edit a schematic: /schem-edit <id> img=... ..."
)
registry.register("schem-del", cmd_schem_del, help_text="Delete a schematic: /schem-del <id>.")
registry.register("export", cmd_export, help_text="Write the maintenance report to the export dir.")

