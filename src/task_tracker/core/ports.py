# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command interpreter.

Commands depend on this Protocol instead of the concrete TaskStore,
which keeps the interpreter testable against an in-memory fake.
"""

from pathlib import Path
from typing import Any, Protocol


class TaskRepo(Protocol):
    last_save_error: Any | None

    @property
    def path(self) -> Path: ...

    def list_tasks(self, include_completed: bool = True) -> list[Any]: ...
    def add(self, description: str, priority: Any = None) -> int: ...
    def complete(self, task_id: int) -> bool: ...
    def delete(self, task_id: int) -> bool: ...
