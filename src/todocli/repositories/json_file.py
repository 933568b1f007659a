"""JSON file repository for the task list."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..errors import StorageError, StorageParseError
from ..models import TodoList

logger = logging.getLogger(__name__)


class JsonFileRepository:
    """
    Repository storing the whole task list in a single JSON file.

    The file holds one object, ``{"todos": [...]}``. Saves write a
    temporary file next to the target and rename it into place.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Location of the JSON file (need not exist yet)
        """
        self.path = path

    def load(self) -> TodoList:
        """Read and parse the task file. A missing file yields an empty list."""
        if not self.path.exists():
            logger.debug("Task file %s not found, starting empty", self.path)
            return TodoList()

        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise StorageError(self.path, f"cannot read task file: {e}") from e

        try:
            todo_list = TodoList.model_validate_json(data, strict=True)
        except ValidationError as e:
            raise StorageParseError(self.path, f"invalid task file: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(todo_list.todos), self.path)
        return todo_list

    def save(self, todo_list: TodoList) -> None:
        """Serialize the task list and replace the file contents."""
        content = todo_list.model_dump_json(indent=2)
        directory = self.path.parent

        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(content)
                f.write("\n")
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(self.path, f"cannot write task file: {e}") from e

        logger.debug("Saved %d tasks to %s", len(todo_list.todos), self.path)

    def _file_mode(self) -> int:
        """Mode for the saved file: the existing file's, else the umask default."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
