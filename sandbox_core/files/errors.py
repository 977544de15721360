"""Errors raised by the in-memory file system."""

from __future__ import annotations


class FileSystemError(Exception):
    """Base class for virtual store failures."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class EntryNotFoundError(FileSystemError):
    """Raised when a path, or the directory meant to hold it, does not exist."""


class EntryExistsError(FileSystemError):
    """Raised when a write would replace a file without ``overwrite``."""


class EntryIsADirectoryError(FileSystemError):
    """Raised when a file operation targets a directory."""


class EntryNotADirectoryError(FileSystemError):
    """Raised when a directory operation targets or traverses a file."""
