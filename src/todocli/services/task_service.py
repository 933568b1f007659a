"""Service for task CRUD operations."""

from __future__ import annotations

import logging

from ..models import Task, TaskListing, TaskStats, TodoList
from ..repositories import RepositoryProtocol

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task operations over a single in-memory task list.

    Every mutating call saves the whole list through the repository
    before returning.
    """

    def __init__(self, repository: RepositoryProtocol, todo_list: TodoList | None = None) -> None:
        self.repository = repository
        self.todo_list = todo_list if todo_list is not None else TodoList()

    def load(self) -> TodoList:
        """Replace the in-memory list with the stored one."""
        self.todo_list = self.repository.load()
        return self.todo_list

    def reset(self) -> None:
        """Discard the in-memory list and start empty."""
        self.todo_list = TodoList()

    def add_task(self, title: str) -> Task:
        """Create a task and persist the list."""
        task = self.todo_list.add(title)
        self._save()
        logger.info("Task created: %d (%s)", task.id, task.title)
        return task

    def complete_task(self, task_id: int) -> Task:
        """Mark a task completed and persist the list."""
        task = self.todo_list.complete(task_id)
        self._save()
        logger.info("Task completed: %d", task_id)
        return task

    def remove_task(self, task_id: int) -> Task:
        """Delete a task and persist the list."""
        task = self.todo_list.remove(task_id)
        self._save()
        logger.info("Task removed: %d", task_id)
        return task

    def list_tasks(self) -> TaskListing:
        """Get all tasks with their status."""
        return self.todo_list.list()

    def get_stats(self) -> TaskStats:
        """Get summary counts."""
        return self.todo_list.stats()

    def to_json(self) -> str:
        """Serialize the current list in the persisted format."""
        return self.todo_list.model_dump_json(indent=2)

    def _save(self) -> None:
        self.repository.save(self.todo_list)
