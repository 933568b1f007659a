"""Interactive command loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from ..errors import StorageError, TaskNotFoundError
from ..services import TaskService
from .ids import parse_task_id
from .output import error, header, info, success, task_listing

logger = logging.getLogger(__name__)

PROMPT = "> "

HELP_TEXT = """\
Available commands:
  add <title>       Add a new task
  list              List all tasks
  complete <ID>     Mark a task as completed
  remove <ID>       Remove a task
  help              Show this help
  quit              Exit (also: exit)
"""


class InteractiveSession:
    """Line-based command interpreter over a task service."""

    def __init__(self, service: TaskService, output: TextIO | None = None) -> None:
        self.service = service
        self.output = output or sys.stdout
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "add": self._add,
            "list": self._list,
            "complete": self._complete,
            "remove": self._remove,
            "help": self._help,
        }

    def start(self) -> None:
        """Load the task file and greet the user."""
        header("Welcome to todocli!", file=self.output)
        info("Type 'help' for a list of commands", file=self.output)
        try:
            todo_list = self.service.load()
        except StorageError as e:
            logger.warning("Could not load tasks: %s", e)
            error(f"Load failed: {e}, starting with an empty list", file=self.output)
            self.service.reset()
        else:
            info(f"Loaded {len(todo_list.todos)} tasks", file=self.output)

    def handle_line(self, line: str) -> bool:
        """
        Execute one input line.

        Returns False when the user asked to leave the loop.
        """
        parts = line.split()
        if not parts:
            return True

        command, rest = parts[0], parts[1:]
        if command in ("quit", "exit"):
            info("Goodbye!", file=self.output)
            return False

        handler = self._commands.get(command)
        if handler is None:
            error(f"Unknown command: {command}, type 'help' for help", file=self.output)
            return True

        handler(rest)
        return True

    def _add(self, rest: list[str]) -> None:
        if not rest:
            error("Please provide a task title", file=self.output)
            return
        title = " ".join(rest)
        try:
            self.service.add_task(title)
        except StorageError as e:
            error(f"Save failed: {e}", file=self.output)
        success(f"Added task: {title}", file=self.output)

    def _list(self, rest: list[str]) -> None:  # noqa: ARG002
        task_listing(self.service.list_tasks(), self.service.get_stats(), file=self.output)

    def _complete(self, rest: list[str]) -> None:
        task_id = self._parse_id(rest)
        if task_id is None:
            return
        try:
            self.service.complete_task(task_id)
        except TaskNotFoundError as e:
            error(str(e), file=self.output)
            return
        except StorageError as e:
            error(f"Save failed: {e}", file=self.output)
        success(f"Task {task_id} completed", file=self.output)

    def _remove(self, rest: list[str]) -> None:
        task_id = self._parse_id(rest)
        if task_id is None:
            return
        try:
            self.service.remove_task(task_id)
        except TaskNotFoundError as e:
            error(str(e), file=self.output)
            return
        except StorageError as e:
            error(f"Save failed: {e}", file=self.output)
        success(f"Removed task {task_id}", file=self.output)

    def _help(self, rest: list[str]) -> None:  # noqa: ARG002
        print(HELP_TEXT, file=self.output)

    def _parse_id(self, rest: list[str]) -> int | None:
        if not rest:
            error("Please provide a task ID", file=self.output)
            return None
        task_id = parse_task_id(rest[0])
        if task_id is None:
            error("Invalid ID", file=self.output)
        return task_id


def run_interactive(
    service: TaskService,
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
) -> int:
    """Run the prompt loop until quit/exit or end of input."""
    stdin = input_stream or sys.stdin
    session = InteractiveSession(service, output)
    session.start()

    while True:
        session.output.write(PROMPT)
        session.output.flush()
        line = stdin.readline()
        if not line:
            # EOF
            session.output.write("\n")
            break
        if not session.handle_line(line):
            break

    return 0
