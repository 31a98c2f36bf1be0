# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.state import AppState
from ..tasks.task_models import Task
from ..tasks.task_store import SQLITE_INT_MAX, SQLITE_INT_MIN

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str]

EXIT_KEY = "5"
EXIT_ALIASES = ("exit", "quit", "q")

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu registry used by the console connector (1 = add, 2 = list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    @staticmethod
    def is_exit(choice: str) -> bool:
        c = choice.strip().lower()
        return c == EXIT_KEY or c in EXIT_ALIASES

    def handle(self, state: AppState, choice: str, prompt: Prompt) -> str:
        """
        Dispatch a menu choice like "1" or "add".
        Returns the reply to print. StorageError from handlers propagates.
        """
        handler = self._handlers.get(choice.strip().lower())
        if handler is None:
            return "Invalid choice."
        return handler(state, prompt)

    def build_menu(self) -> str:
        lines = [f"{key}. {label}" for key, label in self._labels.items()]
        lines.append(f"{EXIT_KEY}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def format_task(task: Task, serial: int | None = None) -> str:
    status = "[✓]" if task.done else "[ ]"
    if serial is not None:
        return f"{serial}. {status} {task.title}"
    return f"{status} {task.id} - {task.title}"


def format_tasks(tasks: Iterable[Task], *, by_serial: bool = False) -> str:
    if by_serial:
        return "\n".join(format_task(t, serial=i) for i, t in enumerate(tasks, start=1))
    return "\n".join(format_task(t) for t in tasks)


def _resolve_task_id(state: AppState, prompt: Prompt) -> tuple[int | None, str | None]:
    """
    Ask the user which task they mean.

    Returns (task_id, None) or (None, message_to_show).
    """
    if state.address_by == "serial":
        tasks = state.task_store.list_tasks()
        if not tasks:
            return None, "No tasks found."
        raw = prompt(f"{format_tasks(tasks, by_serial=True)}\nEnter task number:")
        try:
            serial = int(raw)
        except ValueError:
            return None, "Invalid serial number."
        if not 1 <= serial <= len(tasks):
            return None, "Invalid serial number."
        return tasks[serial - 1].id, None

    raw = prompt("Enter task ID:")
    try:
        task_id = int(raw)
    except ValueError:
        return None, "Invalid task ID."
    if not SQLITE_INT_MIN <= task_id <= SQLITE_INT_MAX:
        return None, "Invalid task ID."
    return task_id, None


def cmd_add(state: AppState, prompt: Prompt) -> str:
    title = prompt("Enter a new task:").strip()
    if not title:
        return "Task cannot be empty!"
    task_id = state.task_store.add_task(title)
    logger.debug("Menu add -> id=%s", task_id)
    return f"✅ Task '{title}' added successfully!"


def cmd_list(state: AppState, prompt: Prompt) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks found."
    return "Your tasks:\n" + format_tasks(tasks, by_serial=state.address_by == "serial")


def cmd_done(state: AppState, prompt: Prompt) -> str:
    task_id, err = _resolve_task_id(state, prompt)
    if task_id is None:
        return err or "Invalid task ID."
    if state.task_store.mark_done(task_id) == 0:
        return f"❌ Task with ID {task_id} not found."
    return "✅ Task marked as done!"


def cmd_delete(state: AppState, prompt: Prompt) -> str:
    task_id, err = _resolve_task_id(state, prompt)
    if task_id is None:
        return err or "Invalid task ID."
    if state.task_store.delete_task(task_id) == 0:
        return f"❌ Task with ID {task_id} not found."
    return "🗑️ Task deleted successfully!"


registry.register("1", cmd_add, label="Add a task", aliases=["add", "a"])
registry.register("2", cmd_list, label="List tasks", aliases=["list", "ls", "l"])
registry.register("3", cmd_done, label="Mark task as done", aliases=["done", "d"])
registry.register("4", cmd_delete, label="Delete a task", aliases=["delete", "del", "rm"])
