# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from electroexpert.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EE_APP_NAME", "EE_DATA_DIR", "EE_STORAGE_DIR", "EE_EXPORT_DIR", "EE_REPORT_PAGE_HEIGHT", "EE_SEED_DEMO_DATA"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.app_name == "electroexpert"
    assert s.storage_dir == Path(".local/electroexpert") / "storage"
    assert s.report_page_height == 270
    assert s.seed_demo_data is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("EE_REPORT_PAGE_HEIGHT", "not-a-number")
    monkeypatch.setenv("EE_SEED_DEMO_DATA", "off")
    monkeypatch.delenv("EE_STORAGE_DIR", raising=False)
    s = Settings.from_env()
    assert s.storage_dir == tmp_path / "storage"
    assert s.report_page_height == 270
    assert s.seed_demo_data is False
