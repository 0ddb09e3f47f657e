# src/task_tracker/tasks/task_api.py

"""
Task operations over an in-memory list.

Ids are 1-based positions in the list as it is right now; they are not
stable across removals. Mutating helpers persist through the store and
return the line to show the user.
"""

from __future__ import annotations

import logging
import re

from ..errors import InvalidTaskIdError
from .task_models import Task, TaskFilter
from .task_store import TaskStore

logger = logging.getLogger(__name__)

INVALID_TASK_ID = "Invalid task ID."
NO_TASKS_FOUND = "No tasks found."

_TASK_ID_RE = re.compile(r"\+?[0-9]+")
_MAX_TASK_ID = 2**64 - 1


def parse_task_id(raw: str) -> int:
    """
    Parse a non-negative integer id that fits in 64 bits.
    Range against the task list is checked later by the operation.
    """
    if not _TASK_ID_RE.fullmatch(raw):
        raise InvalidTaskIdError(raw)
    try:
        task_id = int(raw)
    except ValueError as exc:
        raise InvalidTaskIdError(raw) from exc
    if task_id > _MAX_TASK_ID:
        raise InvalidTaskIdError(raw)
    return task_id


def _in_range(tasks: list[Task], task_id: int) -> bool:
    return 1 <= task_id <= len(tasks)


def add_task(store: TaskStore, tasks: list[Task], description: str) -> str:
    tasks.append(Task(description=description, completed=False))
    store.save(tasks)
    logger.info("Added task #%d", len(tasks))
    return f"Task '{description}' added successfully!"


def complete_task(store: TaskStore, tasks: list[Task], task_id: int) -> str:
    if not _in_range(tasks, task_id):
        logger.info("complete: id=%s out of range (have %d)", task_id, len(tasks))
        return INVALID_TASK_ID

    tasks[task_id - 1].completed = True
    store.save(tasks)
    logger.info("Completed task #%d", task_id)
    return f"Task {task_id} marked as completed!"


def remove_task(store: TaskStore, tasks: list[Task], task_id: int) -> str:
    if not _in_range(tasks, task_id):
        logger.info("remove: id=%s out of range (have %d)", task_id, len(tasks))
        return INVALID_TASK_ID

    removed = tasks.pop(task_id - 1)
    store.save(tasks)
    logger.info("Removed task #%d", task_id)
    return f"Task '{removed.description}' removed successfully!"


def filter_tasks(tasks: list[Task], task_filter: TaskFilter) -> list[Task]:
    return [t for t in tasks if task_filter.matches(t)]


def render_task_list(tasks: list[Task], task_filter: TaskFilter = TaskFilter.ALL) -> str:
    view = filter_tasks(tasks, task_filter)
    if not view:
        return NO_TASKS_FOUND
    return "\n".join(f"{i}. {t.description} ({t.status_label})" for i, t in enumerate(view, start=1))
