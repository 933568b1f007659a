"""Task store model."""

from pydantic import BaseModel, Field

from ..errors import TaskNotFoundError
from .task import Task

NO_TASKS_MESSAGE = "No tasks"


class TaskStats(BaseModel):
    """Summary counts for a task list."""

    total: int = 0
    active: int = 0
    completed: int = 0


class ListingEntry(BaseModel):
    """A task paired with its display status."""

    id: int
    title: str
    status: str

    model_config = {"frozen": True}


class TaskListing(BaseModel):
    """Read-only view of a task list in insertion order."""

    entries: tuple[ListingEntry, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """True when the store holds no tasks."""
        return not self.entries

    def lines(self) -> list[str]:
        """Render one line per task, or the explicit empty-store line."""
        if self.is_empty:
            return [NO_TASKS_MESSAGE]
        return [f"{entry.status} [{entry.id}] {entry.title}" for entry in self.entries]


class TodoList(BaseModel):
    """
    Ordered collection of tasks.

    The serialized form is a single object with one field, ``todos``,
    holding the tasks in insertion order. Mutations happen in place and
    are never persisted automatically.
    """

    todos: list[Task] = Field(default_factory=list)

    def next_id(self) -> int:
        """Id for the next task: one past the highest id currently held."""
        return max((task.id for task in self.todos), default=0) + 1

    def add(self, title: str) -> Task:
        """Append a new uncompleted task and return it."""
        task = Task(id=self.next_id(), title=title)
        self.todos.append(task)
        return task

    def get(self, task_id: int) -> Task:
        """Return the task with the given id."""
        for task in self.todos:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def list(self) -> TaskListing:
        """Snapshot of all tasks with their status."""
        return TaskListing(
            entries=tuple(
                ListingEntry(id=task.id, title=task.title, status=task.status)
                for task in self.todos
            )
        )

    def complete(self, task_id: int) -> Task:
        """Mark a task as completed. Completing twice is not an error."""
        task = self.get(task_id)
        task.mark_completed()
        return task

    def remove(self, task_id: int) -> Task:
        """Delete a task. Remaining tasks keep their ids."""
        for index, task in enumerate(self.todos):
            if task.id == task_id:
                return self.todos.pop(index)
        raise TaskNotFoundError(task_id)

    def stats(self) -> TaskStats:
        """Count total, active and completed tasks."""
        completed = sum(1 for task in self.todos if task.completed)
        return TaskStats(
            total=len(self.todos),
            active=len(self.todos) - completed,
            completed=completed,
        )
