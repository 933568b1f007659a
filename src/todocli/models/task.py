"""Task domain model."""

from pydantic import BaseModel, NonNegativeInt

# Status labels for display
STATUS_COMPLETED = "completed"
STATUS_UNCOMPLETED = "uncompleted"


class Task(BaseModel):
    """A single tracked to-do item."""

    id: NonNegativeInt
    title: str
    completed: bool = False

    @property
    def status(self) -> str:
        """Human-readable completion status."""
        return STATUS_COMPLETED if self.completed else STATUS_UNCOMPLETED

    def mark_completed(self) -> None:
        """Mark the task as done. Completion never reverts."""
        self.completed = True
