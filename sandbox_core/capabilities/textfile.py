"""Text file service reading and writing through the in-memory store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sandbox_core.events import EventBus, EventStream
from sandbox_core.files import EntryExistsError, InMemoryFileSystem
from sandbox_core.resources import Resource

TEXTFILE_SAVED_EVENT = "textfile.saved"
UTF8 = "utf8"


@dataclass(frozen=True)
class TextFileContent:
    resource: Resource
    name: str
    value: str
    encoding: str
    mtime: int
    size: int


class TextFileService(ABC):
    encoding: str

    @property
    @abstractmethod
    def on_did_save(self) -> EventStream: ...

    @abstractmethod
    async def read(self, resource: Resource) -> TextFileContent: ...

    @abstractmethod
    async def write(self, resource: Resource, value: str) -> None: ...

    @abstractmethod
    async def create(self, resource: Resource, value: str = "", *, overwrite: bool = False) -> None: ...

    @abstractmethod
    async def exists(self, resource: Resource) -> bool: ...


class SandboxTextFileService(TextFileService):
    """UTF-8 text files stored in :class:`InMemoryFileSystem`.

    Writes follow the store's policy: the parent directory must exist.
    """

    encoding = UTF8

    def __init__(self, store: InMemoryFileSystem, *, events: EventBus | None = None) -> None:
        self.store = store
        self._events = events or EventBus()

    @property
    def on_did_save(self) -> EventStream:
        return self._events.stream(TEXTFILE_SAVED_EVENT)

    async def read(self, resource: Resource) -> TextFileContent:
        data = self.store.read_file(resource)
        stat = self.store.stat(resource)
        return TextFileContent(
            resource=resource,
            name=resource.name,
            value=data.decode("utf-8"),
            encoding=self.encoding,
            mtime=stat.mtime,
            size=stat.size,
        )

    async def write(self, resource: Resource, value: str) -> None:
        self.store.write_file(resource, value.encode("utf-8"), create=True, overwrite=True)
        self._events.emit(TEXTFILE_SAVED_EVENT, {"resource": resource})

    async def create(self, resource: Resource, value: str = "", *, overwrite: bool = False) -> None:
        if not overwrite and self.store.exists(resource):
            raise EntryExistsError("file already exists", resource.path)
        await self.write(resource, value)

    async def exists(self, resource: Resource) -> bool:
        return self.store.exists(resource)
