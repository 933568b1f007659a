"""Configuration."""

from .settings import DEFAULT_TODO_FILE, Settings

__all__ = [
    "DEFAULT_TODO_FILE",
    "Settings",
]
