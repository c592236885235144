# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="WARNING",
        log_to_file=False,
        tasks_path=tmp_path / "tasks.json",
        data_dir=tmp_path / "data",
        show_help_on_start=False,
    )


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    """Real JSON-backed store in a per-test directory."""
    return TaskStore(tasks_path)


@pytest.fixture()
def fake_repo() -> FakeTaskRepo:
    return FakeTaskRepo()
