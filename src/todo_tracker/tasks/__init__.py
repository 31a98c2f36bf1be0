"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: SQLite-backed storage (TaskStore) and its errors
"""

from .task_models import Task
from .task_store import StorageError, StorageUnavailable, TaskStore

__all__ = ["StorageError", "StorageUnavailable", "Task", "TaskStore"]
