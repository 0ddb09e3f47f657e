# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One invocation = one command: parse argv, load the task file once, run the
command, print its result to stdout.

Exit codes:
- 0: command ran (an out-of-range task id is reported on stdout, still 0)
- 1: bad/missing command, unparsable task id, or the task file could not be written
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from .. import __version__
from ..config import Settings, get_settings
from ..errors import CommandLineError, InvalidTaskIdError, StoreWriteError
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import TaskStore
from .commands import CommandContext, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


def _fail(*lines: str) -> int:
    for line in lines:
        print(line, file=sys.stderr)
    return EXIT_FATAL


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))

    parser = registry.build_parser(
        prog=settings.app_name,
        description="CLI to manage pending tasks",
        version=__version__,
    )

    try:
        args = parser.parse_args(argv)
    except CommandLineError as exc:
        logger.debug("Argument parsing failed: %s", exc)
        return _fail("Invalid command.", f"{parser.prog}: {exc}")

    if args.command is None:
        return _fail("Invalid command.")

    store = TaskStore(settings.tasks_path)
    ctx = CommandContext(store=store, tasks=store.load())

    try:
        out = registry.handle(ctx, args)
    except InvalidTaskIdError as exc:
        logger.debug("%s", exc)
        return _fail("Invalid ID.")
    except StoreWriteError as exc:
        return _fail(f"Error saving tasks: {exc}")
    except CommandLineError:
        return _fail("Invalid command.")

    print(out)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
