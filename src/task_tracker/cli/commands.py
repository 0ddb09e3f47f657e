# src/task_tracker/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from ..errors import CommandLineError
from ..tasks.task_api import (
    add_task,
    complete_task,
    parse_task_id,
    remove_task,
    render_task_list,
)
from ..tasks.task_models import Task, TaskFilter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandContext:
    """What a handler works on: the store and the list loaded from it for this run."""

    store: TaskStore
    tasks: list[Task]


CommandHandler = Callable[[CommandContext, argparse.Namespace], str]
ArgumentsConfigurer = Callable[[argparse.ArgumentParser], None]


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises instead of printing usage and exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise CommandLineError(message)


class CommandRegistry:
    """Subcommand registry; builds the argparse parser and routes parsed args to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configurers: dict[str, ArgumentsConfigurer | None] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgumentsConfigurer | None = None,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._configurers[key] = configure

    @property
    def names(self) -> list[str]:
        return list(self._handlers)

    def build_parser(
        self,
        *,
        prog: str,
        description: str = "",
        version: str | None = None,
    ) -> argparse.ArgumentParser:
        parser = _ArgumentParser(prog=prog, description=description, allow_abbrev=False)
        if version:
            parser.add_argument("--version", action="version", version=f"%(prog)s {version}")

        sub = parser.add_subparsers(dest="command", metavar="<command>")
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, description=help_text, allow_abbrev=False)
            configure = self._configurers[name]
            if configure is not None:
                configure(p)
        return parser

    def handle(self, ctx: CommandContext, args: argparse.Namespace) -> str:
        """
        Run the handler selected by args.command.
        Raises CommandLineError when no (known) command was given.
        """
        name = getattr(args, "command", None)
        if not name:
            raise CommandLineError("no command given")

        handler = self._handlers.get(name.lower())
        if handler is None:
            raise CommandLineError(f"unknown command: {name}")

        logger.debug("Dispatching command=%s", name)
        return handler(ctx, args)


registry = CommandRegistry()


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("description", help="Task description")


def _configure_list(p: argparse.ArgumentParser) -> None:
    p.add_argument("--filter", default=None, help="Filters by 'pending' or 'completed'")


def _configure_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", help="Task ID")


def cmd_add(ctx: CommandContext, args: argparse.Namespace) -> str:
    return add_task(ctx.store, ctx.tasks, args.description)


def cmd_list(ctx: CommandContext, args: argparse.Namespace) -> str:
    return render_task_list(ctx.tasks, TaskFilter.from_raw(args.filter))


def cmd_complete(ctx: CommandContext, args: argparse.Namespace) -> str:
    return complete_task(ctx.store, ctx.tasks, parse_task_id(args.id))


def cmd_remove(ctx: CommandContext, args: argparse.Namespace) -> str:
    return remove_task(ctx.store, ctx.tasks, parse_task_id(args.id))


registry.register("add", cmd_add, help_text="Adds a new task", configure=_configure_add)
registry.register("list", cmd_list, help_text="Lists the tasks", configure=_configure_list)
registry.register(
    "complete", cmd_complete, help_text="Marks a task as completed", configure=_configure_id
)
registry.register("remove", cmd_remove, help_text="Removes a task", configure=_configure_id)
