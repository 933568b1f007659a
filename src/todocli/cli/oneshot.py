"""One-shot command mode: run a single task operation and exit."""

import argparse
import logging
import sys
from collections.abc import Callable

from ..errors import StorageError, TaskNotFoundError
from ..services import TaskService
from .ids import parse_task_id
from .output import error, success, task_listing

logger = logging.getLogger(__name__)

COMMANDS = ("add", "list", "complete", "remove")


def run_oneshot(args: argparse.Namespace, service: TaskService) -> int:
    """
    Execute the command named in ``args.command`` against the task file.

    Returns the process exit code: 0 on success, 1 on any failure.
    Errors go to stderr so stdout stays machine-readable.
    """
    handler = _HANDLERS.get(args.command)
    if handler is None:
        error(f"Unknown command: {args.command}", file=sys.stderr)
        error(f"Available commands: {', '.join(COMMANDS)}", file=sys.stderr)
        return 1

    try:
        service.load()
    except StorageError as e:
        # An unreadable file is treated like a missing one
        logger.warning("Could not load tasks, using an empty list: %s", e)
        service.reset()

    return handler(service, args)


def _cmd_add(service: TaskService, args: argparse.Namespace) -> int:
    title = " ".join(args.title).strip()
    if not title:
        error("Please provide a task title", file=sys.stderr)
        return 1

    try:
        service.add_task(title)
    except StorageError as e:
        error(f"Save failed: {e}", file=sys.stderr)
        return 1

    success("Task added")
    return 0


def _cmd_list(service: TaskService, args: argparse.Namespace) -> int:
    if args.json:
        print(service.to_json())
    else:
        task_listing(service.list_tasks(), service.get_stats())
    return 0


def _cmd_complete(service: TaskService, args: argparse.Namespace) -> int:
    return _apply_to_task(service.complete_task, args.task_id, "Task completed")


def _cmd_remove(service: TaskService, args: argparse.Namespace) -> int:
    return _apply_to_task(service.remove_task, args.task_id, "Task removed")


def _apply_to_task(operation: Callable[[int], object], raw_id: str | None, message: str) -> int:
    """Parse the id, run the mutation, and report the outcome."""
    if raw_id is None:
        error("Please provide a task ID", file=sys.stderr)
        return 1

    task_id = parse_task_id(raw_id)
    if task_id is None:
        error("Invalid ID", file=sys.stderr)
        return 1

    try:
        operation(task_id)
    except TaskNotFoundError as e:
        error(str(e), file=sys.stderr)
        return 1
    except StorageError as e:
        error(f"Save failed: {e}", file=sys.stderr)
        return 1

    success(message)
    return 0


_HANDLERS: dict[str, Callable[[TaskService, argparse.Namespace], int]] = {
    "add": _cmd_add,
    "list": _cmd_list,
    "complete": _cmd_complete,
    "remove": _cmd_remove,
}
