"""CLI entry point for todocli."""

import argparse
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for both one-shot and interactive use."""
    parser = argparse.ArgumentParser(
        prog="todocli",
        description="Personal task tracker. Run without a command for the interactive prompt.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Path to the task file (default: todos.json in the current directory)",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Open the full-screen terminal UI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("title", nargs="*", help="Task title (words are joined with spaces)")

    list_parser = subparsers.add_parser("list", help="List all tasks")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the task list as JSON for other programs",
    )

    complete_parser = subparsers.add_parser("complete", help="Mark a task as completed")
    complete_parser.add_argument("task_id", nargs="?", metavar="ID", help="Task ID")

    remove_parser = subparsers.add_parser("remove", help="Remove a task")
    remove_parser.add_argument("task_id", nargs="?", metavar="ID", help="Task ID")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    settings_kwargs: dict = {}
    if args.file:
        settings_kwargs["todo_file"] = args.file
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.tui:
        # Import here so the CLI modes don't pay for loading textual
        from .app import run

        run(settings)
        return

    from .cli import run_interactive, run_oneshot
    from .repositories import JsonFileRepository
    from .services import TaskService

    service = TaskService(JsonFileRepository(settings.todo_file))

    if args.command is None:
        raise SystemExit(run_interactive(service))

    raise SystemExit(run_oneshot(args, service))


if __name__ == "__main__":
    main()
