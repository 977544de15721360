"""Environment descriptor: every location the application needs, from one root."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .config import SandboxConfiguration
from .resources import USER_DATA_SCHEME, Resource

# Relative suffixes under the user roaming data home, keyed by accessor name.
DERIVED_SUFFIXES: dict[str, str] = {
    "settings_resource": "settings.json",
    "argv_resource": "argv.json",
    "snippets_home": "snippets",
    "global_storage_home": "globalStorage",
    "workspace_storage_home": "workspaceStorage",
    "keybindings_resource": "keybindings.json",
    "log_file": "window.log",
    "untitled_workspaces_home": "Workspaces",
    "service_machine_id_resource": "machineid",
    "user_data_sync_log_resource": "syncLog",
    "user_data_sync_home": "syncHome",
    "telemetry_log_resource": "telemetry.log",
    "tmp_dir": "tmp",
    "logs_home": "logs",
}


class EnvironmentService(ABC):
    """Describes where the application keeps its data and how it was launched."""

    session_id: str
    machine_id: str
    remote_authority: str | None
    disable_telemetry: bool
    is_built: bool
    is_extension_development: bool

    @property
    @abstractmethod
    def user_roaming_data_home(self) -> Resource: ...

    @property
    @abstractmethod
    def settings_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def argv_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def snippets_home(self) -> Resource: ...

    @property
    @abstractmethod
    def global_storage_home(self) -> Resource: ...

    @property
    @abstractmethod
    def workspace_storage_home(self) -> Resource: ...

    @property
    @abstractmethod
    def keybindings_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def log_file(self) -> Resource: ...

    @property
    @abstractmethod
    def untitled_workspaces_home(self) -> Resource: ...

    @property
    @abstractmethod
    def service_machine_id_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def user_data_sync_log_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def user_data_sync_home(self) -> Resource: ...

    @property
    @abstractmethod
    def telemetry_log_resource(self) -> Resource: ...

    @property
    @abstractmethod
    def tmp_dir(self) -> Resource: ...

    @property
    @abstractmethod
    def logs_path(self) -> str: ...

    @property
    @abstractmethod
    def user_data_path(self) -> str: ...


class SandboxEnvironmentService(EnvironmentService):
    """Environment descriptor rooted at the configured user-data directory.

    Every accessor is a pure join of the root and a fixed suffix. The launch
    flags are pinned to conservative values (telemetry off, not a built
    distribution, no extension development) so any component asking about
    its mode gets the same answer.
    """

    def __init__(
        self,
        configuration: SandboxConfiguration,
        *,
        is_windows: bool | None = None,
    ) -> None:
        self.configuration = configuration
        self._user_data_dir = Resource.file(configuration.user_data_dir, is_windows=is_windows)

        self.session_id = configuration.session_id
        self.machine_id = configuration.machine_id
        self.remote_authority = configuration.remote_authority
        self.log_level = configuration.log_level
        self.os_release = "unknown"

        self.disable_telemetry = True
        self.is_built = False
        self.is_extension_development = False
        self.debug_renderer = False
        self.verbose = False
        self.disable_extensions: tuple[str, ...] = ()
        self.args: dict[str, Any] = {}

        # No host installation backs the sandbox.
        self.exec_path: str | None = None
        self.app_root: str | None = None
        self.user_home: Resource | None = None
        self.extensions_path: str | None = None
        self.builtin_extensions_path: str | None = None
        self.crash_reporter_directory: str | None = None

    @property
    def user_data_dir(self) -> Resource:
        return self._user_data_dir

    @property
    def user_roaming_data_home(self) -> Resource:
        return self._user_data_dir.with_scheme(USER_DATA_SCHEME)

    def _derive(self, key: str) -> Resource:
        return self.user_roaming_data_home.join_path(DERIVED_SUFFIXES[key])

    @property
    def settings_resource(self) -> Resource:
        return self._derive("settings_resource")

    @property
    def argv_resource(self) -> Resource:
        return self._derive("argv_resource")

    @property
    def snippets_home(self) -> Resource:
        return self._derive("snippets_home")

    @property
    def global_storage_home(self) -> Resource:
        return self._derive("global_storage_home")

    @property
    def workspace_storage_home(self) -> Resource:
        return self._derive("workspace_storage_home")

    @property
    def keybindings_resource(self) -> Resource:
        return self._derive("keybindings_resource")

    @property
    def log_file(self) -> Resource:
        return self._derive("log_file")

    @property
    def untitled_workspaces_home(self) -> Resource:
        return self._derive("untitled_workspaces_home")

    @property
    def service_machine_id_resource(self) -> Resource:
        return self._derive("service_machine_id_resource")

    @property
    def user_data_sync_log_resource(self) -> Resource:
        return self._derive("user_data_sync_log_resource")

    @property
    def user_data_sync_home(self) -> Resource:
        return self._derive("user_data_sync_home")

    @property
    def telemetry_log_resource(self) -> Resource:
        return self._derive("telemetry_log_resource")

    @property
    def tmp_dir(self) -> Resource:
        return self._derive("tmp_dir")

    @property
    def logs_path(self) -> str:
        return self._derive("logs_home").path

    @property
    def user_data_path(self) -> str:
        return self._user_data_dir.fs_path

    def derived_resources(self) -> dict[str, Resource]:
        """Return every derived location keyed by accessor name."""

        return {key: self._derive(key) for key in DERIVED_SUFFIXES}
