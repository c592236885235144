# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_NAME",
        "LOG_LEVEL",
        "LOG_TO_FILE",
        "TASKS_PATH",
        "DATA_DIR",
        "SHOW_HELP",
    ):
        monkeypatch.delenv(f"TASK_TRACKER_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "task-tracker"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.tasks_path == Path("tasks.json")
    assert s.data_dir == Path(".local/task_tracker")
    assert s.show_help_on_start is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_TASKS_PATH", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_LOG_TO_FILE", "yes")
    monkeypatch.setenv("TASK_TRACKER_SHOW_HELP", "off")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "mine.json"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True
    assert s.show_help_on_start is False


def test_bad_or_empty_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_SHOW_HELP", "maybe")
    monkeypatch.setenv("TASK_TRACKER_TASKS_PATH", "   ")

    s = Settings.from_env()
    assert s.show_help_on_start is True
    assert s.tasks_path == Path("tasks.json")
