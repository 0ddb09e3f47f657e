# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is read from environment variables (optionally via a local .env file).
With nothing set, the tracker keeps tasks.json in the current directory and only
prints warnings/errors to stderr.
"""

ENV_VARS = {
    # App / logging
    "TASKS_APP_NAME": "Program name shown in usage/version output (default: task-tracker).",
    "TASKS_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKS_LOG_DIR": "If set, full DEBUG log is written to <dir>/tasks.log (default: off).",
    # Storage
    "TASKS_FILE": "Task file path (default: tasks.json in the working directory).",
}
