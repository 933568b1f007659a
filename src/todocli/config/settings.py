"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_TODO_FILE = "todos.json"


class Settings(BaseSettings):
    """Application settings."""

    todo_file: Path = Field(
        default=Path(DEFAULT_TODO_FILE),
        description="Path to the JSON file holding the task list",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TODOCLI_",
    }
