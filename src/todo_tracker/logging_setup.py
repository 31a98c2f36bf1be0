# src/todo_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "todo_tracker"

# python-dotenv reports unparsable .env lines at WARNING; the user should see those.
_DOTENV_LOGGER = "dotenv"


class _MenuNoiseFilter(logging.Filter):
    """
    Decide what may reach stderr while the numbered menu is on screen.

    Store and console records pass (the handler level still applies).
    Bad .env lines pass at WARNING+. Captured warnings (sqlite3 adapter
    deprecations, unclosed-connection ResourceWarnings) and any other
    library only pass at ERROR+; the log file keeps all of them.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == APP_LOGGER or name.startswith(APP_LOGGER + "."):
            return True
        if name == _DOTENV_LOGGER or name.startswith(_DOTENV_LOGGER + "."):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


_FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
# Terminal lines sit between menu prompts; keep them short.
_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"


def _console_handler(level: int) -> logging.Handler:
    h = logging.StreamHandler(sys.stderr)
    h.setLevel(level)
    h.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    h.addFilter(_MenuNoiseFilter())
    return h


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    h = logging.FileHandler(str(log_file), encoding="utf-8")
    h.setLevel(level)
    h.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return h


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the stderr and <log_dir>/todo.log handlers on the root logger.

    Called once by cli.main before the store is opened, so the
    "TaskStore ready" line and any open failure land in the file.
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "todo.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(console_level))
    root.addHandler(_file_handler(log_file, file_level))

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)

    return log_file
