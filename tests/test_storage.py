from __future__ import annotations

import json

import pytest

from models import LINE_WIDTH
from storage import Storage, TaskFileError
from tasklist import TaskList

from .conftest import make_task


def test_missing_file_loads_empty(storage) -> None:
    assert storage.load_tasks() == []


def test_save_and_reload_keeps_task_content(storage) -> None:
    saved = TaskList([
        make_task("C", (2023, 1, 2), (8, 15), "first task"),
        make_task("L", (2024, 2, 29), (23, 59), "z" * 60),
    ])
    storage.save_tasks(saved.get_tasks())
    loaded = storage.load_tasks()
    assert [(t.priority, t.date, t.time, t.lines) for t in loaded] == [
        (t.priority, t.date, t.time, t.lines) for t in saved
    ]


def test_saved_shape(storage) -> None:
    storage.save_tasks(TaskList([make_task("H", (2023, 6, 20), (9, 0), "Buy milk")]).get_tasks())
    data = json.loads(storage.path.read_text(encoding="utf-8"))
    assert data == [{
        "id": 1,
        "priority": "H",
        "date": [2023, 6, 20],
        "time": [9, 0],
        "tasks": ["Buy milk".ljust(LINE_WIDTH)],
    }]


def test_empty_list_saves_empty_array(storage) -> None:
    storage.save_tasks([])
    assert json.loads(storage.path.read_text(encoding="utf-8")) == []


def test_save_creates_parent_directory(tmp_path) -> None:
    storage = Storage(tmp_path / "nested" / "tasks.json")
    storage.save_tasks([])
    assert storage.path.exists()


@pytest.mark.parametrize("content", [
    "not json",
    '{"id": 1}',
    '[1, 2]',
    '[{"priority": "H", "date": [2023, 6, 20], "time": [9, 0]}]',
    '[{"priority": "X", "date": [2023, 6, 20], "time": [9, 0], "tasks": ["a"]}]',
    '[{"priority": "H", "date": [2023, 6], "time": [9, 0], "tasks": ["a"]}]',
    '[{"priority": "H", "date": [2023, 6, 20], "time": [9, 0], "tasks": []}]',
    '[{"priority": "H", "date": [2023, 6, 15.9], "time": [9, 0], "tasks": ["' + "a" * 44 + '"]}]',
    '[{"priority": "H", "date": [2023, "6", 15], "time": [9, 0], "tasks": ["' + "a" * 44 + '"]}]',
    '[{"priority": "H", "date": [2023, 6, 15], "time": [true, 0], "tasks": ["' + "a" * 44 + '"]}]',
    '[{"priority": "H", "date": [2023, 6, 15], "time": [9, 0], "tasks": ["too short"]}]',
])
def test_malformed_file_raises(storage, content) -> None:
    storage.path.write_text(content, encoding="utf-8")
    with pytest.raises(TaskFileError) as excinfo:
        storage.load_tasks()
    assert excinfo.value.path == storage.path


def test_non_utf8_file_raises(storage) -> None:
    storage.path.write_bytes(b'[\xff\xfe]')
    with pytest.raises(TaskFileError) as excinfo:
        storage.load_tasks()
    assert "UTF-8" in excinfo.value.reason


def test_hand_written_valid_record_loads(storage) -> None:
    storage.path.write_text(
        '[{"id": 7, "priority": "L", "date": [2023, 6, 15], "time": [9, 0], "tasks": ["' + "a" * 44 + '"]}]',
        encoding="utf-8",
    )
    (task,) = storage.load_tasks()
    assert (task.priority, task.date, task.time) == ("L", (2023, 6, 15), (9, 0))
