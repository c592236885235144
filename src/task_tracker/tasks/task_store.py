# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from .task_codec import load_tasks, save_tasks
from .task_errors import PersistenceError, TaskTrackerError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_PATH = "tasks.json"


class TaskStore:
    """
    In-memory task collection with write-through JSON persistence.

    The collection keeps creation order; listings sort a copy.
    Every mutation rewrites the whole file. If that write fails, the change
    is kept in memory, the failure is logged and exposed as `last_save_error`.

    IDs are never reused: the counter starts one past the highest loaded id
    and only moves forward.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_PATH) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        self._next_id = 1
        self.load_error: TaskTrackerError | None = None
        self.last_save_error: PersistenceError | None = None

        result = load_tasks(self._path)
        if result.ok:
            self._tasks = list(result.tasks)
        else:
            self.load_error = result.error
            logger.warning(
                "Error loading tasks from %s (%s). Starting with an empty task list.",
                self._path,
                result.error,
            )

        if self._tasks:
            self._next_id = max(t.id for t in self._tasks) + 1
        logger.info("TaskStore ready path=%s total=%d next_id=%d", self._path, len(self._tasks), self._next_id)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    def _persist(self) -> bool:
        try:
            save_tasks(self._tasks, self._path)
        except PersistenceError as e:
            self.last_save_error = e
            logger.warning("Error saving tasks: %s", e)
            return False
        self.last_save_error = None
        return True

    # ---- queries ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self, include_completed: bool = True) -> list[Task]:
        """Tasks ordered by (priority, id); the stored order is untouched."""
        ordered = sorted(self._tasks, key=lambda t: (t.priority, t.id))
        if include_completed:
            return ordered
        return [t for t in ordered if not t.completed]

    # ---- mutations ----

    def add(self, description: str, priority: Priority = Priority.MEDIUM) -> int:
        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=description, priority=Priority(priority)))
        self._next_id += 1
        logger.debug("Task added id=%s priority=%s", task_id, Priority(priority).label)
        self._persist()
        return task_id

    def complete(self, task_id: int) -> bool:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[i] = dataclasses.replace(task, completed=True)
                logger.debug("Task completed id=%s", task_id)
                self._persist()
                return True
        return False

    def delete(self, task_id: int) -> bool:
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            return False
        self._tasks = remaining
        logger.debug("Task deleted id=%s", task_id)
        self._persist()
        return True
