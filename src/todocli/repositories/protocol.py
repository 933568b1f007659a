"""Repository protocol for task storage backends."""

from typing import Protocol

from ..models import TodoList


class RepositoryProtocol(Protocol):
    """Interface for task storage backends.

    A backend persists the whole task list at once. There is no
    incremental update: every save replaces the stored list.
    """

    def load(self) -> TodoList:
        """Load the stored task list.

        Returns:
            The stored list, or an empty list if nothing has been saved yet.

        Raises:
            StorageError: The backend could not be read.
            StorageParseError: The stored content is not a valid task list.
        """
        ...

    def save(self, todo_list: TodoList) -> None:
        """Replace the stored task list.

        Args:
            todo_list: The list to persist.

        Raises:
            StorageError: The backend could not be written.
        """
        ...
