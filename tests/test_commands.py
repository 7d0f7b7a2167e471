# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

from electroexpert.cli.commands import CommandRegistry, parse_fields, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, '/a x "y z"') == "h2:x,y z"
    assert reg.handle(state, "/BEE", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")
    assert "Could not parse" in (reg.handle(state, '/a "open') or "")


def test_parse_fields() -> None:
    assert parse_fields(["title=Hab 1", "severity=high"], ("title", "severity")) == {
        "title": "Hab 1",
        "severity": "high",
    }


def test_add_then_day_then_delete(state) -> None:
    reply = registry.handle(
        state, '/add title="Hab 404 - Enchufe" category=otros severity=critical'
    ) or ""
    assert reply.startswith("Task saved: Hab 404 - Enchufe")
    task = state.tasks.list_all()[0]
    assert task.date == state.agenda_date
    assert task.severity.value == "critical"

    day = registry.handle(state, "/day") or ""
    assert "Hab 404 - Enchufe - OTROS • critical" in day

    registry.handle(state, f"/edit {task.id} solution=Cambiado")
    assert state.tasks.get(task.id).solution == "Cambiado"

    registry.handle(state, f"/del {task.id}")
    assert state.tasks.get(task.id) is None


def test_bad_input_is_reported_not_raised(state) -> None:
    assert (registry.handle(state, "/add color=red") or "").startswith("Not saved")
    assert (registry.handle(state, '/schem-add title="Sin foto" category=otros') or "").startswith("Not saved")
    assert "Invalid date" in (registry.handle(state, "/day 2024-02-30") or "")
    assert state.schematics.count() == 10


def test_pick_updates_agenda_date(state) -> None:
    registry.handle(state, "/pick 2024-01-15")
    assert state.agenda_date == "2024-01-15"
    reply = registry.handle(state, "/day") or ""
    assert reply.startswith("Agenda 2024-01-15:")


def test_calendar_navigation(state) -> None:
    start = (state.calendar.year, state.calendar.month)
    registry.handle(state, "/next")
    registry.handle(state, "/prev")
    assert (state.calendar.year, state.calendar.month) == start
    assert "Lu  Ma  Mi  Ju  Vi  Sá  Do" in (registry.handle(state, "/cal") or "")


def test_export_writes_report(state, settings) -> None:
    notes: list[str] = []
    reply = registry.handle(state, "/export", emit=notes.append) or ""
    assert reply.startswith("Report written to")
    files = list(Path(settings.export_dir).glob("Reporte_Mantenimiento_*.txt"))
    assert len(files) == 1
    assert "1. Hab 101 - Fuga Agua AC" in files[0].read_text("utf-8")
    assert notes


def test_usage_lists_known_categories(state) -> None:
    assert "category=clima|cocina|piscina" in (registry.handle(state, "/add") or "")
    assert "cuadros-gral" in (registry.handle(state, "/schem-add") or "")
