# src/electroexpert/report/generator.py

"""
Report layout for the maintenance log export.

build_report() turns the task list into positioned text lines and page breaks.
A renderer (PDF, plain text) only has to draw them in order. Coordinates are in
the renderer's units (millimetres on an A4 page for the PDF collaborator).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..records.models import Task

logger = logging.getLogger(__name__)

REPORT_TITLE = "ElectroExpert Pro - Reporte Técnico"

TITLE_Y = 20
EXPORT_DATE_Y = 30
FIRST_TASK_Y = 50
PAGE_TOP_Y = 20
DEFAULT_PAGE_HEIGHT = 270

MARGIN_X = 20
INDENT_X = 25

TITLE_SIZE = 22
EXPORT_DATE_SIZE = 12
HEADER_SIZE = 14
BODY_SIZE = 10


@dataclass(frozen=True, slots=True)
class ReportLine:
    text: str
    x: int
    y: int
    size: int


@dataclass(frozen=True, slots=True)
class PageBreak:
    pass


ReportBlock = ReportLine | PageBreak


@dataclass(frozen=True, slots=True)
class ReportLayout:
    filename: str
    exported_at: datetime
    blocks: tuple[ReportBlock, ...]

    @property
    def page_count(self) -> int:
        return 1 + sum(1 for b in self.blocks if isinstance(b, PageBreak))


def report_filename(exported_at: datetime) -> str:
    # whole seconds are exact as a float; add the milliseconds separately
    seconds = int(exported_at.replace(microsecond=0).timestamp())
    millis = seconds * 1000 + exported_at.microsecond // 1000
    return f"Reporte_Mantenimiento_{millis}.pdf"


def build_report(
    tasks: Sequence[Task],
    *,
    exported_at: datetime | None = None,
    page_height: int = DEFAULT_PAGE_HEIGHT,
) -> ReportLayout:
    """
    Lay out every task as four stacked lines.

    The page-height check runs before each task: once the cursor has passed
    page_height, a PageBreak is emitted and the cursor goes back to the top.
    """
    if exported_at is None:
        exported_at = datetime.now()

    blocks: list[ReportBlock] = [
        ReportLine(REPORT_TITLE, MARGIN_X, TITLE_Y, TITLE_SIZE),
        ReportLine(
            f"Fecha de exportación: {exported_at.strftime('%d/%m/%Y')}",
            MARGIN_X,
            EXPORT_DATE_Y,
            EXPORT_DATE_SIZE,
        ),
    ]

    y = FIRST_TASK_Y
    for i, t in enumerate(tasks, start=1):
        if y > page_height:
            blocks.append(PageBreak())
            y = PAGE_TOP_Y

        blocks.append(ReportLine(f"{i}. {t.title} [{t.date}]", MARGIN_X, y, HEADER_SIZE))
        y += 7
        blocks.append(
            ReportLine(
                f"Categoría: {t.category} | Severidad: {t.severity.value}",
                INDENT_X,
                y,
                BODY_SIZE,
            )
        )
        y += 5
        blocks.append(ReportLine(f"Diagnosis: {t.description}", INDENT_X, y, BODY_SIZE))
        y += 5
        blocks.append(ReportLine(f"Solución: {t.solution}", INDENT_X, y, BODY_SIZE))
        y += 15

    layout = ReportLayout(
        filename=report_filename(exported_at),
        exported_at=exported_at,
        blocks=tuple(blocks),
    )
    logger.debug("Report laid out: tasks=%d pages=%d", len(tasks), layout.page_count)
    return layout


def render_text(layout: ReportLayout) -> str:
    """Plain-text rendering: one line per ReportLine, form feed between pages."""
    pages: list[list[str]] = [[]]
    for block in layout.blocks:
        if isinstance(block, PageBreak):
            pages.append([])
            continue
        indent = " " * 2 if block.x > MARGIN_X else ""
        pages[-1].append(indent + block.text)
    return "\n\f\n".join("\n".join(lines) for lines in pages) + "\n"


def write_text_report(layout: ReportLayout, directory: str | Path) -> Path:
    """Write render_text(layout) next to where the PDF would go (.txt suffix)."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / Path(layout.filename).with_suffix(".txt").name
    path.write_text(render_text(layout), "utf-8")
    logger.info("Report exported to %s (%d pages)", path, layout.page_count)
    return path
