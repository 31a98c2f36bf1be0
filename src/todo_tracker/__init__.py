"""
todo_tracker: single-user terminal task tracker backed by SQLite.

Layout:
- tasks/: Task model and TaskStore (the SQLite data layer)
- core/: AppState and the TaskRepo port
- cli/: entrypoint, bootstrap and the numbered menu handlers
- connectors/: the interactive console loop
"""

__version__ = "0.1.0"
