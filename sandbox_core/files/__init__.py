"""In-memory file store backing the sandboxed workspace."""

from .errors import (
    EntryExistsError,
    EntryIsADirectoryError,
    EntryNotADirectoryError,
    EntryNotFoundError,
    FileSystemError,
)
from .memfs import FileStat, FileType, InMemoryFileSystem

__all__ = [
    "InMemoryFileSystem",
    "FileStat",
    "FileType",
    "FileSystemError",
    "EntryNotFoundError",
    "EntryExistsError",
    "EntryIsADirectoryError",
    "EntryNotADirectoryError",
]
