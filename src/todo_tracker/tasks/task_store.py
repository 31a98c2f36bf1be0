# tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from types import TracebackType

from .task_models import Task

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class StorageError(Exception):
    """A query against the task database failed."""


class StorageUnavailable(StorageError):
    """The task database could not be opened or initialized."""


class TaskStore:
    """
    SQLite task store.

    One connection is opened in __init__ and held until close().
    The store is not shared between threads or processes.

    Schema is "create if missing" only:
    - tasks(id INTEGER PRIMARY KEY AUTOINCREMENT, title, done)

    Id reuse:
    - with reuse_ids=True (default) a successful delete rewinds the
      AUTOINCREMENT counter to MAX(id), so the next insert gets MAX(id) + 1
      and ids of deleted rows can be handed out again.
    """

    def __init__(self, db_path: str | Path = "tasks.db", *, reuse_ids: bool = True) -> None:
        self._db_path = Path(db_path)
        self._reuse_ids = reuse_ids
        self._conn: sqlite3.Connection | None = None

        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path))
            self._conn.row_factory = sqlite3.Row
            self._ensure_schema()
        except (OSError, sqlite3.Error) as e:
            self.close()
            raise StorageUnavailable(f"cannot open task database {self._db_path}: {e}") from e

        try:
            total = self.count_tasks()
        except StorageError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s reuse_ids=%s", self._db_path, total, reuse_ids)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        conn, self._conn = self._conn, None
        if conn is not None:
            conn.close()
            logger.debug("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"task database {self._db_path} is closed")
        return self._conn

    def _rollback(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.rollback()
        except sqlite3.Error:
            logger.debug("Rollback failed.", exc_info=True)

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                done BOOLEAN NOT NULL DEFAULT 0
            )
            """
        )
        conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            done=bool(row["done"]),
        )

    def _reset_sequence(self, conn: sqlite3.Connection) -> int:
        (max_id,) = conn.execute("SELECT MAX(id) FROM tasks").fetchone()
        seq = int(max_id) if max_id is not None else 0
        conn.execute("UPDATE sqlite_sequence SET seq = ? WHERE name = 'tasks'", (seq,))
        return seq

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"count failed: {e}") from e
        return int(n)

    def add_task(self, title: str) -> int:
        """
        Insert a new, not-done task and return its id.

        The title is stored as given; callers reject empty titles.
        """
        conn = self._get_conn()
        try:
            cur = conn.execute("INSERT INTO tasks (title, done) VALUES (?, ?)", (title, False))
            conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StorageError(f"add failed: {e}") from e

        rowid = cur.lastrowid
        if rowid is None:
            raise StorageError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def list_tasks(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT id, title, done FROM tasks ORDER BY id").fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"list failed: {e}") from e
        return [self._row_to_task(r) for r in rows]

    def mark_done(self, task_id: int) -> int:
        """
        Set done for task_id. Returns affected rows (0 = no such task).

        Ids outside the SQLite INTEGER range cannot exist and also give 0.
        """
        conn = self._get_conn()
        if not SQLITE_INT_MIN <= task_id <= SQLITE_INT_MAX:
            return 0
        try:
            cur = conn.execute("UPDATE tasks SET done = 1 WHERE id = ?", (int(task_id),))
            conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StorageError(f"mark done failed: {e}") from e
        logger.debug("Task mark done id=%s updated=%s", task_id, cur.rowcount)
        return cur.rowcount

    def delete_task(self, task_id: int) -> int:
        """
        Delete task_id. Returns deleted rows (0 = no such task).

        When a row was removed and reuse_ids is on, the AUTOINCREMENT
        counter is rewound to MAX(id) (0 for an empty table) in the same commit.
        """
        conn = self._get_conn()
        if not SQLITE_INT_MIN <= task_id <= SQLITE_INT_MAX:
            return 0
        try:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            deleted = cur.rowcount
            seq = None
            if deleted and self._reuse_ids:
                seq = self._reset_sequence(conn)
            conn.commit()
        except sqlite3.Error as e:
            self._rollback()
            raise StorageError(f"delete failed: {e}") from e

        logger.debug("Task delete id=%s deleted=%s", task_id, deleted)
        if seq is not None:
            logger.info("TaskStore id counter reset to %s", seq)
        return deleted
