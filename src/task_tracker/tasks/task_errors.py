# src/task_tracker/tasks/task_errors.py

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for task file problems."""


class PersistenceError(TaskTrackerError):
    """The task file could not be read or written."""

    def __init__(self, path: str | Path, action: str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.action = action
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {action} {self.path}{detail}")


class MalformedDocument(TaskTrackerError):
    """The task file is not a JSON list of task records."""


class MalformedRecord(MalformedDocument):
    """A single task record is missing a field or has a field of the wrong type."""

    def __init__(self, message: str, record: object = None) -> None:
        self.record = record
        super().__init__(message)
