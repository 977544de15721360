"""Hierarchical byte store that lives entirely in process memory."""

from __future__ import annotations

import logging
import posixpath
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from sandbox_core.events import EventBus, EventStream
from sandbox_core.resources import Resource

from .errors import (
    EntryExistsError,
    EntryIsADirectoryError,
    EntryNotADirectoryError,
    EntryNotFoundError,
)

FILE_CREATED_EVENT = "file.created"
FILE_CHANGED_EVENT = "file.changed"
FILE_DELETED_EVENT = "file.deleted"


class FileType(Enum):
    FILE = "file"
    DIRECTORY = "directory"


def _now() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class File:
    name: str
    data: bytes = b""
    ctime: int = field(default_factory=_now)
    mtime: int = field(default_factory=_now)

    type = FileType.FILE

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class Directory:
    name: str
    entries: dict[str, "File | Directory"] = field(default_factory=dict)
    ctime: int = field(default_factory=_now)
    mtime: int = field(default_factory=_now)

    type = FileType.DIRECTORY

    @property
    def size(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class FileStat:
    type: FileType
    ctime: int
    mtime: int
    size: int


class InMemoryFileSystem:
    """A tree of :class:`Directory` and :class:`File` nodes keyed by path.

    Paths come from :class:`Resource` values; the scheme is ignored so the
    same store can back ``file`` and user-data resources alike.

    Directory creation is lenient: ``mkdir`` creates missing parents and is a
    no-op for an existing directory. File writes are strict: the parent
    directory must already exist, nothing is created implicitly.
    """

    def __init__(self, events: EventBus | None = None) -> None:
        self.root = Directory("")
        self.events = events or EventBus()
        self._logger = logging.getLogger(__name__)

    @property
    def on_did_change_file(self) -> EventStream:
        return self.events.stream(FILE_CHANGED_EVENT)

    # ---------- Queries ----------

    def stat(self, resource: Resource) -> FileStat:
        entry = self._lookup(resource.path)
        return FileStat(type=entry.type, ctime=entry.ctime, mtime=entry.mtime, size=entry.size)

    def exists(self, resource: Resource) -> bool:
        try:
            self._lookup(resource.path)
        except (EntryNotFoundError, EntryNotADirectoryError):
            return False
        return True

    def readdir(self, resource: Resource) -> list[tuple[str, FileType]]:
        directory = self._lookup_directory(resource.path)
        return sorted((name, entry.type) for name, entry in directory.entries.items())

    def read_file(self, resource: Resource) -> bytes:
        entry = self._lookup(resource.path)
        if isinstance(entry, Directory):
            raise EntryIsADirectoryError("cannot read a directory", resource.path)
        return entry.data

    def walk(self) -> list[tuple[str, FileType]]:
        """Return every node below the root as sorted ``(path, type)`` pairs."""
        return sorted(self._walk(self.root, "/"))

    # ---------- Mutations ----------

    def mkdir(self, resource: Resource) -> None:
        current = self.root
        walked = "/"
        for part in self._parts(resource.path):
            walked = posixpath.join(walked, part)
            entry = current.entries.get(part)
            if entry is None:
                entry = Directory(part)
                current.entries[part] = entry
                current.mtime = _now()
                self._fire(FILE_CREATED_EVENT, walked, FileType.DIRECTORY)
            elif isinstance(entry, File):
                raise EntryNotADirectoryError("a file already exists", walked)
            current = entry

    def write_file(
        self,
        resource: Resource,
        content: bytes,
        *,
        create: bool,
        overwrite: bool,
    ) -> None:
        parent, name = self._split(resource.path)
        entry = parent.entries.get(name)
        if isinstance(entry, Directory):
            raise EntryIsADirectoryError("cannot write over a directory", resource.path)
        if entry is None and not create:
            raise EntryNotFoundError("file does not exist", resource.path)
        if entry is not None and create and not overwrite:
            raise EntryExistsError("file already exists", resource.path)

        if entry is None:
            entry = File(name)
            parent.entries[name] = entry
            parent.mtime = _now()
            event_name = FILE_CREATED_EVENT
        else:
            event_name = FILE_CHANGED_EVENT
        entry.data = bytes(content)
        entry.mtime = _now()
        self._logger.debug("wrote %d bytes to %s", entry.size, resource.path)
        self._fire(event_name, resource.path, FileType.FILE)

    def delete(self, resource: Resource, *, recursive: bool = False) -> None:
        parent, name = self._split(resource.path)
        entry = parent.entries.get(name)
        if entry is None:
            raise EntryNotFoundError("no such entry", resource.path)
        if isinstance(entry, Directory) and entry.entries and not recursive:
            raise EntryIsADirectoryError("directory is not empty", resource.path)
        del parent.entries[name]
        parent.mtime = _now()
        self._fire(FILE_DELETED_EVENT, resource.path, entry.type)

    def rename(self, source: Resource, target: Resource, *, overwrite: bool = False) -> None:
        old_parent, old_name = self._split(source.path)
        new_parent, new_name = self._split(target.path)
        source_path = posixpath.normpath(source.path)
        target_path = posixpath.normpath(target.path)
        if target_path == source_path or target_path.startswith(source_path + "/"):
            raise EntryExistsError("cannot move an entry into itself", target.path)
        entry = old_parent.entries.get(old_name)
        if entry is None:
            raise EntryNotFoundError("no such entry", source.path)
        if not overwrite and new_name in new_parent.entries:
            raise EntryExistsError("target already exists", target.path)
        del old_parent.entries[old_name]
        entry.name = new_name
        new_parent.entries[new_name] = entry
        old_parent.mtime = new_parent.mtime = _now()
        self._fire(FILE_DELETED_EVENT, source.path, entry.type)
        self._fire(FILE_CREATED_EVENT, target.path, entry.type)

    # ---------- Internal helpers ----------

    @staticmethod
    def _parts(path: str) -> list[str]:
        return [part for part in path.split("/") if part]

    def _lookup(self, path: str) -> File | Directory:
        entry: File | Directory = self.root
        walked = "/"
        for part in self._parts(path):
            if isinstance(entry, File):
                raise EntryNotADirectoryError("not a directory", walked)
            walked = posixpath.join(walked, part)
            child = entry.entries.get(part)
            if child is None:
                raise EntryNotFoundError("no such entry", walked)
            entry = child
        return entry

    def _lookup_directory(self, path: str) -> Directory:
        entry = self._lookup(path)
        if isinstance(entry, File):
            raise EntryNotADirectoryError("not a directory", path)
        return entry

    def _lookup_parent(self, path: str) -> Directory:
        return self._lookup_directory(posixpath.dirname(path))

    def _split(self, path: str) -> tuple[Directory, str]:
        name = posixpath.basename(path)
        if not name:
            raise EntryIsADirectoryError("the root is a directory", path)
        return self._lookup_parent(path), name

    def _walk(self, directory: Directory, prefix: str) -> Iterator[tuple[str, FileType]]:
        for name, entry in directory.entries.items():
            path = posixpath.join(prefix, name)
            yield path, entry.type
            if isinstance(entry, Directory):
                yield from self._walk(entry, path)

    def _fire(self, event_name: str, path: str, file_type: FileType) -> None:
        self.events.emit(event_name, {"path": path, "type": file_type})
