# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Task:
    """
    Read-only snapshot of a row in the tasks table.

    Notes:
    - id is assigned by the store and may be reused after a delete
      (see TaskStore.delete_task).
    - done only ever moves False -> True.
    """

    id: int
    title: str
    done: bool = False
