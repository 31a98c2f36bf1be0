# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected, or the global ones),
- ensures the local data directory exists,
- opens the TaskStore and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Raises StorageUnavailable if the task database cannot be opened.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.db_path, reuse_ids=settings.reuse_ids)
    logger.debug("AppState created (address_by=%s)", settings.address_by)

    return AppState(
        settings=settings,
        task_store=task_store,
        address_by=settings.address_by,
    )
