# tests/test_task_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from task_tracker.errors import StoreWriteError
from task_tracker.tasks.task_models import Task
from task_tracker.tasks.task_store import TaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope.json")
    assert store.load() == []


def test_save_then_load_keeps_order_and_flags(store: TaskStore) -> None:
    tasks = [
        Task("  padded  "),
        Task("done already", completed=True),
        Task("ünïcode ✓"),
        Task(""),
    ]
    store.save(tasks)
    assert store.load() == tasks


def test_save_writes_pretty_json_array(store: TaskStore) -> None:
    store.save([Task("buy milk")])
    text = store.path.read_text("utf-8")
    assert json.loads(text) == [{"description": "buy milk", "completed": False}]
    assert "\n  " in text


def test_save_empty_list_writes_empty_array(store: TaskStore) -> None:
    store.save([Task("x")])
    store.save([])
    assert json.loads(store.path.read_text("utf-8")) == []
    assert not store.path.with_name(store.path.name + ".tmp").exists()


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"description": "x", "completed": false}',
        '[{"description": "x"}]',
        '[{"description": 1, "completed": false}]',
        '[{"description": "x", "completed": "yes"}]',
        '["x"]',
        "",
    ],
)
def test_malformed_file_loads_empty(store: TaskStore, content: str) -> None:
    store.path.write_text(content, "utf-8")
    assert store.load() == []


def test_unwritable_location_raises_store_write_error(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "missing-dir" / "tasks.json")
    with pytest.raises(StoreWriteError):
        store.save([Task("x")])


def test_unencodable_description_raises_store_write_error(store: TaskStore) -> None:
    store.save([Task("kept")])

    with pytest.raises(StoreWriteError):
        store.save([Task("bad\udcff")])

    assert not store.path.with_name(store.path.name + ".tmp").exists()
    assert store.load() == [Task("kept")]
