# tests/test_views.py

from __future__ import annotations

from electroexpert.core.views import (
    PENDING_SOLUTION,
    category_badge,
    daily_agenda,
    schematic_card,
    task_card,
)
from electroexpert.records.models import build_schematic, build_task


def test_daily_agenda_items() -> None:
    tasks = [
        build_task({"id": "a", "title": "A", "category": "clima", "severity": "high", "date": "2024-01-15", "solution": "ok"}),
        build_task({"id": "b", "title": "B", "date": "2024-01-16"}),
        build_task({"id": "c", "title": "C", "category": "piscina", "date": "2024-01-15"}),
    ]
    agenda = daily_agenda("2024-01-15", tasks)
    assert [i.task_id for i in agenda.items] == ["a", "c"]
    assert agenda.items[0].subtitle == "CLIMA • high"
    assert agenda.items[0].solved is True
    assert agenda.items[1].solved is False
    assert daily_agenda("2024-02-01", tasks).is_empty


def test_task_card_shows_pending_solution() -> None:
    card = task_card(build_task({"id": "x", "title": "X"}))
    assert card.solution == PENDING_SOLUTION
    assert card.severity == "medium"


def test_schematic_badge() -> None:
    assert category_badge("clima-hvac") == "CLIMA HVAC"
    assert category_badge("a-b-c") == "A B-C"
    card = schematic_card(build_schematic({"id": "s", "title": "S", "category": "cuadros-gral", "img": "i.png"}))
    assert card.badge == "CUADROS GRAL"
