# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.tasks.task_models import Task
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with cli.main.

    A SimpleNamespace keeps tests independent of the process environment and .env.
    """
    return SimpleNamespace(
        app_name="task-tracker",
        log_level="WARNING",
        log_dir=None,
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def two_tasks(store: TaskStore) -> list[Task]:
    tasks = [Task("write report"), Task("call bob", completed=True)]
    store.save(tasks)
    return tasks
