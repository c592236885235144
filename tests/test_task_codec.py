# tests/test_task_codec.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from task_tracker.tasks.task_codec import load_tasks, save_tasks
from task_tracker.tasks.task_errors import MalformedDocument, MalformedRecord, PersistenceError
from task_tracker.tasks.task_models import Priority, Task


def _sample() -> list[Task]:
    return [
        Task(id=2, description="Walk dog"),
        Task(id=1, description="Buy milk", completed=True, priority=Priority.HIGH),
        Task(id=5, description='Say "hi" to Zoë', priority=Priority.LOW),
    ]


def test_save_then_load_preserves_tasks_and_order(tasks_path: Path) -> None:
    tasks = _sample()
    save_tasks(tasks, tasks_path)

    result = load_tasks(tasks_path)
    assert result.ok
    assert result.created is False
    assert result.tasks == tasks


def test_saved_document_is_pretty_printed_list(tasks_path: Path) -> None:
    save_tasks(_sample()[:1], tasks_path)
    text = tasks_path.read_text("utf-8")

    assert json.loads(text) == [{"id": 2, "description": "Walk dog", "completed": False, "priority": 2}]
    assert '\n    {\n        "id": 2,' in text
    assert not tasks_path.with_name("tasks.json.tmp").exists()


def test_save_overwrites_previous_contents(tasks_path: Path) -> None:
    save_tasks(_sample(), tasks_path)
    save_tasks([], tasks_path)
    assert json.loads(tasks_path.read_text("utf-8")) == []


def test_load_missing_file_creates_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.json"
    result = load_tasks(path)

    assert result.ok
    assert result.created is True
    assert result.tasks == []
    assert json.loads(path.read_text("utf-8")) == []


def test_load_invalid_json_reports_error_and_keeps_file(tasks_path: Path) -> None:
    tasks_path.write_text('[{"id": 1, "descr', "utf-8")

    result = load_tasks(tasks_path)
    assert not result.ok
    assert isinstance(result.error, MalformedDocument)
    assert result.tasks == []
    assert tasks_path.read_text("utf-8") == '[{"id": 1, "descr'


def test_load_non_list_document(tasks_path: Path) -> None:
    tasks_path.write_text('{"tasks": []}', "utf-8")
    result = load_tasks(tasks_path)
    assert isinstance(result.error, MalformedDocument)
    assert result.tasks == []


def test_load_with_one_bad_record_discards_everything(tasks_path: Path) -> None:
    tasks_path.write_text(
        json.dumps(
            [
                {"id": 1, "description": "ok", "completed": False, "priority": 2},
                {"id": 2, "description": "bad", "completed": False},
            ]
        ),
        "utf-8",
    )
    result = load_tasks(tasks_path)
    assert isinstance(result.error, MalformedRecord)
    assert result.tasks == []


def test_load_unreadable_path_is_persistence_error(tmp_path: Path) -> None:
    # A directory exists at the path but cannot be read as a file.
    path = tmp_path / "tasks.json"
    path.mkdir()
    result = load_tasks(path)
    assert isinstance(result.error, PersistenceError)
    assert result.tasks == []


def test_save_into_unwritable_location_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", "utf-8")
    with pytest.raises(PersistenceError) as exc_info:
        save_tasks(_sample(), blocker / "tasks.json")
    assert exc_info.value.action == "write"
    assert isinstance(exc_info.value.cause, OSError)


def test_load_oversized_integer_is_malformed(tasks_path: Path) -> None:
    tasks_path.write_text("[" + "1" * 5000 + "]", "utf-8")
    result = load_tasks(tasks_path)
    assert isinstance(result.error, MalformedDocument)
    assert result.tasks == []


def test_load_deeply_nested_document_is_malformed(tasks_path: Path) -> None:
    tasks_path.write_text("[" * 100_000 + "]" * 100_000, "utf-8")
    result = load_tasks(tasks_path)
    assert isinstance(result.error, MalformedDocument)
    assert result.tasks == []


def test_undecodable_description_round_trips(tasks_path: Path) -> None:
    # Bytes that were not valid in the input encoding arrive as lone surrogates.
    tasks = [Task(id=1, description="caf\udce9")]
    save_tasks(tasks, tasks_path)

    assert "\\udce9" in tasks_path.read_text("utf-8")
    assert load_tasks(tasks_path).tasks == tasks
    assert not tasks_path.with_name("tasks.json.tmp").exists()
