# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskFilter(StrEnum):
    """
    View selector for `list`.

    Notes:
    - anything that is not "pending" or "completed" (including None and "")
      means ALL, it is never an error.
    """

    PENDING = "pending"
    COMPLETED = "completed"
    ALL = "all"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskFilter:
        if raw == cls.PENDING.value:
            return cls.PENDING
        if raw == cls.COMPLETED.value:
            return cls.COMPLETED
        return cls.ALL

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.PENDING:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False

    @property
    def status_label(self) -> str:
        return "Completed" if self.completed else "Pending"

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Strict decode of one stored record; raises ValueError on any shape mismatch."""
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")
        description = raw.get("description")
        completed = raw.get("completed")
        if not isinstance(description, str):
            raise ValueError("task record has no string 'description'")
        if not isinstance(completed, bool):
            raise ValueError("task record has no boolean 'completed'")
        return cls(description=description, completed=completed)
