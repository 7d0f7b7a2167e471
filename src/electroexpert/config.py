# src/electroexpert/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Nothing is required at import time; every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "EE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Switches ----
    console_enabled: bool
    seed_demo_data: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_dir: Path
    export_dir: Path

    # ---- Report ----
    report_page_height: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "electroexpert") or "electroexpert"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        seed_demo_data = _env_bool(_k("SEED_DEMO_DATA"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/electroexpert"))
        storage_dir = _env_path(_k("STORAGE_DIR"), data_dir / "storage")
        export_dir = _env_path(_k("EXPORT_DIR"), data_dir / "exports")

        report_page_height = _env_int(_k("REPORT_PAGE_HEIGHT"), 270)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            seed_demo_data=seed_demo_data,
            data_dir=data_dir,
            storage_dir=storage_dir,
            export_dir=export_dir,
            report_page_height=report_page_height,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
