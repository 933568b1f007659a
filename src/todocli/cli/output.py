"""Colorful CLI output helpers."""

import sys
from typing import TextIO

from ..models import STATUS_COMPLETED, TaskListing, TaskStats

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
RULE = "-" * 35


def _supports_color(stream: TextIO) -> bool:
    """Check if the stream is a terminal that supports color output."""
    return hasattr(stream, "isatty") and stream.isatty()


def _colorize(text: str, color: str, stream: TextIO) -> str:
    """Apply color to text if the stream supports it."""
    if _supports_color(stream):
        return f"{color}{text}{RESET}"
    return text


def success(message: str, file: TextIO | None = None) -> None:
    """Print success message with green checkmark."""
    stream = file or sys.stdout
    print(f"{_colorize(CHECK, GREEN, stream)} {message}", file=stream)


def info(message: str, file: TextIO | None = None) -> None:
    """Print info message with yellow bullet."""
    stream = file or sys.stdout
    print(f"{_colorize(BULLET, YELLOW, stream)} {message}", file=stream)


def header(message: str, file: TextIO | None = None) -> None:
    """Print header message in blue."""
    stream = file or sys.stdout
    print(_colorize(message, BLUE, stream), file=stream)


def error(message: str, file: TextIO | None = None) -> None:
    """Print error message with red cross."""
    stream = file or sys.stdout
    print(f"{_colorize(CROSS, RED, stream)} {message}", file=stream)


def task_listing(listing: TaskListing, stats: TaskStats | None = None, file: TextIO | None = None) -> None:
    """Print the task list between rules, or the empty-list message."""
    stream = file or sys.stdout
    lines = listing.lines()
    if listing.is_empty:
        info(lines[0], file=stream)
        return

    header("Tasks:", file=stream)
    print(RULE, file=stream)
    for entry, line in zip(listing.entries, lines, strict=True):
        color = DIM if entry.status == STATUS_COMPLETED else ""
        print(_colorize(line, color, stream) if color else line, file=stream)
    print(RULE, file=stream)
    if stats is not None:
        print(
            f"{stats.total} total, {stats.active} active, {stats.completed} completed",
            file=stream,
        )
