# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .task_errors import MalformedRecord


class Priority(IntEnum):
    """
    Task priority.

    Lower value sorts first in listings, so HIGH tasks are shown before LOW ones.
    The integer value is what gets persisted.
    """

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @classmethod
    def from_name(cls, name: str | None) -> Priority:
        if not name:
            return cls.MEDIUM
        try:
            return cls[name.strip().upper()]
        except KeyError:
            return cls.MEDIUM

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM

    def to_serializable(self) -> dict[str, Any]:
        # Key order is the on-disk field order.
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "priority": int(self.priority),
        }

    @classmethod
    def from_serializable(cls, record: Any) -> Task:
        if not isinstance(record, Mapping):
            raise MalformedRecord(f"Task record must be an object, got {type(record).__name__}", record)

        for key in ("id", "description", "completed", "priority"):
            if key not in record:
                raise MalformedRecord(f"Task record is missing '{key}'", record)

        task_id = record["id"]
        description = record["description"]
        completed = record["completed"]
        priority = record["priority"]

        # bool is a subclass of int; reject it where an int is expected.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise MalformedRecord(f"Task id must be an integer, got {task_id!r}", record)
        if task_id < 1:
            raise MalformedRecord(f"Task id must be positive, got {task_id}", record)
        if not isinstance(description, str):
            raise MalformedRecord(f"Task {task_id}: description must be a string", record)
        if not isinstance(completed, bool):
            raise MalformedRecord(f"Task {task_id}: completed must be a boolean", record)
        if not isinstance(priority, int) or isinstance(priority, bool):
            raise MalformedRecord(f"Task {task_id}: priority must be an integer", record)
        if priority not in {p.value for p in Priority}:
            raise MalformedRecord(f"Task {task_id}: unknown priority {priority}", record)

        return cls(
            id=task_id,
            description=description,
            completed=completed,
            priority=Priority(priority),
        )
