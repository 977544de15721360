"""Addressable resource locations used throughout the sandbox."""

from __future__ import annotations

import posixpath
import sys
from dataclasses import dataclass, replace

from .errors import AddressingError

FILE_SCHEME = "file"
USER_DATA_SCHEME = "vscode-userdata"


@dataclass(frozen=True)
class Resource:
    """Immutable ``scheme:path`` pair with POSIX path semantics."""

    scheme: str
    path: str

    def __post_init__(self) -> None:
        if not self.scheme:
            raise AddressingError("scheme cannot be empty.")
        if not self.path.startswith("/"):
            raise AddressingError(f"path must be absolute: {self.path!r}")

    @classmethod
    def file(cls, path: str, *, is_windows: bool | None = None) -> "Resource":
        """Create a ``file`` resource, normalising Windows separators."""

        if is_windows is None:
            is_windows = sys.platform == "win32"
        if is_windows:
            path = path.replace("\\", "/")
        if not path.startswith("/"):
            path = "/" + path
        return cls(FILE_SCHEME, posixpath.normpath(path))

    def with_scheme(self, scheme: str) -> "Resource":
        return replace(self, scheme=scheme)

    def join_path(self, *segments: str) -> "Resource":
        """Append relative ``segments``; they may never leave this subtree."""

        parts: list[str] = []
        for segment in segments:
            if segment.startswith("/"):
                raise AddressingError(f"segment must be relative: {segment!r}")
            for part in segment.split("/"):
                if part == "..":
                    raise AddressingError(f"segment escapes its root: {segment!r}")
                if part and part != ".":
                    parts.append(part)
        if not parts:
            return self
        return replace(self, path=posixpath.join(self.path, *parts))

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def parent(self) -> "Resource":
        return replace(self, path=posixpath.dirname(self.path))

    @property
    def fs_path(self) -> str:
        return self.path

    def __str__(self) -> str:
        return f"{self.scheme}://{self.path}"
