# src/task_tracker/__init__.py

"""Single-user command-line task tracker backed by a local JSON file."""

__version__ = "1.0"
