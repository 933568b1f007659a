"""Widget components."""

from .confirm_modal import ConfirmModal
from .new_task_bar import NewTaskBar

__all__ = [
    "ConfirmModal",
    "NewTaskBar",
]
