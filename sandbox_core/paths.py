"""Host-side locations the sandbox reads its own settings from."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "sandbox"
APP_AUTHOR = "Sandbox Bootstrap"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class UserDirs:
    """Resolve host directories through ``platformdirs`` unless overridden.

    These are the only real-disk paths the bootstrap ever looks at, and only
    for reading configuration; everything the sandboxed application sees lives
    in the in-memory store.
    """

    app_name: str = APP_NAME
    app_author: str = APP_AUTHOR
    config_dir_override: Path | None = None

    def config_dir(self) -> Path:
        if self.config_dir_override:
            return self.config_dir_override
        return Path(user_config_dir(self.app_name, appauthor=self.app_author))

    def config_file(self) -> Path:
        return self.config_dir() / CONFIG_FILE_NAME
