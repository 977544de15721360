"""Layered configuration for the sandbox bootstrap."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .paths import UserDirs

DEFAULT_USER_DATA_DIR = "/sandbox-user-data-dir"

_DEFAULTS: dict[str, str | None] = {
    "session_id": "sandbox-session",
    "machine_id": "sandbox-machine",
    "remote_authority": None,
    "user_data_dir": DEFAULT_USER_DATA_DIR,
    "log_level": "info",
}
_ENV_KEY_MAP: dict[str, str] = {
    "session_id": "SANDBOX_SESSION_ID",
    "machine_id": "SANDBOX_MACHINE_ID",
    "remote_authority": "SANDBOX_REMOTE_AUTHORITY",
    "user_data_dir": "SANDBOX_USER_DATA_DIR",
    "log_level": "SANDBOX_LOG_LEVEL",
}


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    section: Any = data.get("sandbox", data)
    if not isinstance(section, dict):
        return {}
    return {key: str(value) for key, value in section.items() if not isinstance(value, dict)}


@dataclass(frozen=True)
class SandboxConfiguration:
    """Values the hosting process hands to the environment descriptor."""

    session_id: str = "sandbox-session"
    machine_id: str = "sandbox-machine"
    remote_authority: str | None = None
    user_data_dir: str = DEFAULT_USER_DATA_DIR
    log_level: str = "info"


@dataclass
class ConfigResolver:
    """Resolve settings honoring overrides, env, user config file, defaults order."""

    user_dirs: UserDirs | None = None
    overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str | None] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.overrides = dict(self.overrides or {})
        self.env = self.env if self.env is not None else os.environ
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults

    def resolve_setting(self, key: str) -> str | None:
        if value := self.overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if value := self._user_config_layer().get(key):
            return value
        return self.defaults.get(key)

    def resolve(self) -> SandboxConfiguration:
        """Build a configuration object from every layer."""
        values = {key: self.resolve_setting(key) for key in _DEFAULTS}
        return SandboxConfiguration(
            session_id=values["session_id"] or "sandbox-session",
            machine_id=values["machine_id"] or "sandbox-machine",
            remote_authority=values["remote_authority"],
            user_data_dir=values["user_data_dir"] or DEFAULT_USER_DATA_DIR,
            log_level=(values["log_level"] or "info").lower(),
        )

    def _env_value(self, key: str) -> str | None:
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias)
        return None

    def _user_config_layer(self) -> dict[str, str]:
        return _load_config_from_file(self.user_dirs.config_file())
