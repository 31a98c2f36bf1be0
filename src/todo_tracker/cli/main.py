# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store, then runs the console menu
in the main thread. Exit status: 0 on normal exit, 1 if the store
cannot be opened.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_store import StorageUnavailable

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        store = getattr(state, "task_store", None)
        if store is not None:
            store.close()
    except Exception:
        logger.exception("TaskStore close failed.")


def main(settings=None) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=getattr(settings, "data_dir", ".local/todo"), console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    try:
        state = create_initial_state(settings=settings)
    except StorageUnavailable as e:
        logger.error("Failed to initialize database: %s", e)
        print(f"Failed to initialize database: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
