# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState, bootstrap and main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "tasks.db",
        address_by="id",
        reuse_ids=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> Iterator[TaskStore]:
    with TaskStore(settings.db_path, reuse_ids=settings.reuse_ids) as s:
        yield s


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired to a real SQLite TaskStore in tmp_path.

    The store is real on purpose: handler output depends on its id semantics.
    """
    return AppState(settings=settings, task_store=store, address_by="id")
