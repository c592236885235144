# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns Settings into a concrete
TaskStore and wires it into a CommandInterpreter.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore
from .commands import CommandInterpreter

logger = logging.getLogger(__name__)


def create_task_store(settings: Settings | None = None) -> TaskStore:
    """
    Build the session's TaskStore (loads or creates the task file).

    Settings are injectable for tests; None falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    return TaskStore(settings.tasks_path)


def create_interpreter(settings: Settings | None = None) -> CommandInterpreter:
    store = create_task_store(settings)
    if store.load_error is not None:
        logger.debug("Session starts with an empty task list after load error: %s", store.load_error)
    return CommandInterpreter(store)
