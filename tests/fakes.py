# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from task_tracker.errors import StoreWriteError
from task_tracker.tasks.task_models import Task
from task_tracker.tasks.task_store import TaskStore


class RecordingStore(TaskStore):
    """TaskStore that keeps snapshots of every save instead of touching disk."""

    def __init__(self) -> None:
        super().__init__("unused.json")
        self.saves: list[list[Task]] = []

    def load(self) -> list[Task]:
        return []

    def save(self, tasks: Iterable[Task]) -> None:
        self.saves.append([Task(t.description, t.completed) for t in tasks])


class FailingStore(TaskStore):
    """TaskStore whose writes always fail."""

    def save(self, tasks: Iterable[Task]) -> None:
        raise StoreWriteError("disk full")
