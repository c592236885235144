# src/task_tracker/tasks/task_codec.py

"""
JSON persistence for the task collection.

The file is a pretty-printed JSON list of task records, always rewritten as a
whole. Writes go to a temporary sibling first and are moved into place with
os.replace, so a crash mid-write never leaves a truncated task file.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .task_errors import MalformedDocument, PersistenceError, TaskTrackerError
from .task_models import Task

logger = logging.getLogger(__name__)

JSON_INDENT = 4


@dataclass(frozen=True, slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    error: TaskTrackerError | None = None
    # True when the file did not exist and an empty one was written.
    created: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_serializable() for t in tasks], indent=JSON_INDENT)


def decode_tasks(text: str) -> list[Task]:
    """Parse a task document. Raises MalformedDocument / MalformedRecord."""
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and too-deep nesting all land here.
        raise MalformedDocument(f"Task file is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedDocument(f"Task file must contain a list, got {type(data).__name__}")

    return [Task.from_serializable(item) for item in data]


def save_tasks(tasks: Iterable[Task], path: str | Path) -> None:
    """Overwrite `path` with the full collection. Raises PersistenceError."""
    path = Path(path)
    payload = encode_tasks(tasks)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(payload + "\n", "utf-8")
        os.replace(tmp, path)
    except (OSError, ValueError) as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise PersistenceError(path, "write", e) from e
    logger.debug("Saved task file %s", path)


def load_tasks(path: str | Path) -> LoadResult:
    """
    Read the task file.

    - missing file -> empty collection, and an empty file is written
    - unreadable / malformed file -> empty collection with `error` set;
      the file itself is left untouched
    """
    path = Path(path)

    if not path.exists():
        try:
            save_tasks([], path)
        except PersistenceError as e:
            return LoadResult(error=e, created=False)
        logger.info("Created empty task file %s", path)
        return LoadResult(created=True)

    try:
        text = path.read_text("utf-8")
    except UnicodeDecodeError as e:
        return LoadResult(error=MalformedDocument(f"Task file is not UTF-8 text: {e}"))
    except OSError as e:
        return LoadResult(error=PersistenceError(path, "read", e))

    try:
        tasks = decode_tasks(text)
    except MalformedDocument as e:
        return LoadResult(error=e)

    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return LoadResult(tasks=tasks)
