# src/task_tracker/errors.py

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for failures that abort a command."""


class StoreWriteError(TaskTrackerError):
    """The task file could not be written."""


class InvalidTaskIdError(TaskTrackerError):
    """A task id argument is not a non-negative integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"not a task id: {raw!r}")
        self.raw = raw


class CommandLineError(TaskTrackerError):
    """Missing/unknown subcommand or malformed arguments."""
