# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..tasks.task_store import StorageError

logger = logging.getLogger(__name__)


def _banner(app_name: str) -> str:
    title = f"{app_name.upper()} Application"
    return f"\n{title}\n{'-' * len(title)}"


def _prompt(question: str) -> str:
    print(question)
    return input().strip()


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (address_by=%s).", state.address_by)

    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    print(_banner(app_name))
    print(menu_registry.build_menu())

    while True:
        try:
            print()
            choice = input("Enter your choice (1-5): ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not choice:
            continue

        if menu_registry.is_exit(choice):
            logger.info("Console exit command received.")
            print("Goodbye!")
            break

        try:
            reply = menu_registry.handle(state, choice, _prompt)
        except StorageError as e:
            logger.info("Storage error while handling choice %r: %s", choice, e, exc_info=True)
            reply = f"Storage error: {e}"
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed mid-command, exiting.")
            print()
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling a command."

        print(reply)

    logger.info("Console connector finished.")
