# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings kept on the state so handlers can read them without globals.
    settings: object

    task_store: TaskRepo

    # "id" or "serial": how the user refers to tasks in mark-done / delete.
    address_by: str = "id"
