# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Menu handlers depend on this Protocol rather than on TaskStore directly,
so tests can swap in an in-memory repo.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Persistence port for tasks.

    mark_done / delete_task return the number of affected rows;
    0 means "no such task" and is not an error.
    Failures are raised as tasks.task_store.StorageError.
    """

    def add_task(self, title: str) -> int: ...

    def list_tasks(self) -> list[Task]: ...

    def mark_done(self, task_id: int) -> int: ...

    def delete_task(self, task_id: int) -> int: ...

    def close(self) -> None: ...
