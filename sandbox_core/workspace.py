"""The single-folder workspace the sandboxed application opens."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

from .errors import SeedWriteError
from .files import FileSystemError, InMemoryFileSystem
from .resources import Resource
from .seed import SEED_FILES, SEED_FOLDERS

SIMPLE_WORKSPACE_ID = "4064f6ec-cb38-4ad0-af64-ee6467e63c82"


@dataclass(frozen=True)
class WorkspaceIdentifier:
    """Thin descriptor for a single-folder workspace."""

    id: str
    uri: Resource

    @classmethod
    def simple(cls, *, is_windows: bool | None = None) -> "WorkspaceIdentifier":
        if is_windows is None:
            is_windows = sys.platform == "win32"
        path = "\\simpleWorkspace" if is_windows else "/simpleWorkspace"
        return cls(id=SIMPLE_WORKSPACE_ID, uri=Resource.file(path, is_windows=is_windows))


class WorkspaceSeeder:
    """Materialize the seed tree below ``workspace_root`` in the virtual store.

    Folders are created before any file beneath them because the store does
    not create parents on write.
    """

    def __init__(
        self,
        store: InMemoryFileSystem,
        workspace_root: Resource,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.workspace_root = workspace_root
        self._logger = logger or logging.getLogger(__name__)

    def create_folder(self, relative_path: str) -> Resource:
        target = self.workspace_root.join_path(relative_path)
        try:
            self.store.mkdir(target)
        except FileSystemError as exc:
            raise SeedWriteError(f"unable to create folder {target.path}") from exc
        return target

    def create_file(self, parent: str, name: str, content: str = "") -> Resource:
        target = self.workspace_root.join_path(parent, name)
        try:
            self.store.write_file(target, content.encode("utf-8"), create=True, overwrite=True)
        except FileSystemError as exc:
            raise SeedWriteError(f"unable to write {target.path}") from exc
        self._logger.debug("seeded %s", target.path)
        return target

    def seed(self) -> tuple[Resource, ...]:
        """Write every seed folder, then every seed file, in manifest order."""

        written = [self.create_folder(folder) for folder in SEED_FOLDERS]
        for seed_file in SEED_FILES:
            written.append(self.create_file(seed_file.parent, seed_file.name, seed_file.content))
        return tuple(written)
