# src/electroexpert/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Loggers that report every write or click; the console only shows their problems.
_CHATTY_PREFIXES: tuple[str, ...] = (
    "electroexpert.storage.",
    "electroexpert.agenda.",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the agenda console readable.

    Store lifecycle lines (ready, seeded) and command results stay visible.
    Storage writes and calendar clicks only surface at WARNING+.
    Anything outside the app (py.warnings included) only surfaces at ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not name.startswith("electroexpert."):
            return record.levelno >= logging.ERROR
        if name.startswith(_CHATTY_PREFIXES):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/electroexpert",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Console handler on stderr (filtered) plus a full DEBUG log in
    <log_dir>/electroexpert.log. Call once from main(), before the stores load.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "electroexpert.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
