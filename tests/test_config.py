# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_tracker.config import Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_DATA_DIR",
    "TODO_DB_PATH",
    "TODO_ADDRESS_BY",
    "TODO_REUSE_IDS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo"
    assert s.log_level == "WARNING"
    assert s.db_path == Path("tasks.db")
    assert s.data_dir == Path(".local/todo")
    assert s.address_by == "id"
    assert s.reuse_ids is True


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DB_PATH", str(tmp_path / "x.db"))
    monkeypatch.setenv("TODO_ADDRESS_BY", "Serial")
    monkeypatch.setenv("TODO_REUSE_IDS", "no")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.db_path == tmp_path / "x.db"
    assert s.address_by == "serial"
    assert s.reuse_ids is False
    assert s.log_level == "DEBUG"


def test_unknown_address_mode_falls_back_to_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_ADDRESS_BY", "position")
    assert Settings.from_env().address_by == "id"


def test_blank_bool_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_REUSE_IDS", "  ")
    assert Settings.from_env().reuse_ids is True


@pytest.mark.parametrize("raw", ["maybe", "ture", "2"])
def test_unparsable_bool_keeps_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TODO_REUSE_IDS", raw)
    assert Settings.from_env().reuse_ids is True


@pytest.mark.parametrize("raw", ["0", "false", "No", "n", "OFF"])
def test_false_spellings(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TODO_REUSE_IDS", raw)
    assert Settings.from_env().reuse_ids is False
