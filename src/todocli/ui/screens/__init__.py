"""Screen components."""

from .help import HelpScreen
from .task_list import TaskListScreen

__all__ = [
    "HelpScreen",
    "TaskListScreen",
]
