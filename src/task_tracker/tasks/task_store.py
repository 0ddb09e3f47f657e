# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import StoreWriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The file holds the whole task list as a pretty-printed JSON array of
    {"description": str, "completed": bool} objects, in insertion order.

    Load policy ("fresh start"):
    - missing file -> empty list
    - unreadable / malformed file -> empty list, reason logged at INFO

    Save always rewrites the full file (temp file + os.replace).
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.debug("TaskStore %s does not exist, starting empty", self._path)
            return []

        try:
            raw = json.loads(self._path.read_text("utf-8"))
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            tasks = [Task.from_dict(item) for item in raw]
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError.
            logger.info("TaskStore %s unreadable (%s), starting empty", self._path, exc)
            return []

        logger.debug("TaskStore loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(payload.encode("utf-8"))
            os.replace(tmp, self._path)
        except (OSError, UnicodeEncodeError) as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.debug("TaskStore failed to write %s: %s", self._path, exc)
            raise StoreWriteError(str(exc)) from exc

        logger.debug("TaskStore saved to %s", self._path)
