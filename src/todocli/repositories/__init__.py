"""Repository layer for data access."""

from .json_file import JsonFileRepository
from .protocol import RepositoryProtocol

__all__ = [
    "JsonFileRepository",
    "RepositoryProtocol",
]
