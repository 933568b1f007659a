"""Data models."""

from .task import STATUS_COMPLETED, STATUS_UNCOMPLETED, Task
from .todo_list import (
    NO_TASKS_MESSAGE,
    ListingEntry,
    TaskListing,
    TaskStats,
    TodoList,
)

__all__ = [
    "NO_TASKS_MESSAGE",
    "STATUS_COMPLETED",
    "STATUS_UNCOMPLETED",
    "ListingEntry",
    "Task",
    "TaskListing",
    "TaskStats",
    "TodoList",
]
