"""Exceptions raised by the task store and its persistence layer."""

from pathlib import Path


class TodoError(Exception):
    """Base class for todocli errors."""


class TaskNotFoundError(TodoError, LookupError):
    """Raised when an operation references a task id absent from the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} does not exist")
        self.task_id = task_id


class StorageError(TodoError):
    """Raised when the task file cannot be read or written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class StorageParseError(StorageError):
    """Raised when the task file does not contain a valid task list."""
