"""Composition root that assembles the sandboxed environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sandbox_core.capabilities import (
    EnvironmentService,
    ExtensionService,
    LogLevel,
    LogService,
    NullExtensionService,
    SandboxLogService,
    SandboxTaskService,
    SandboxTerminalInstanceService,
    SandboxTextFileService,
    SandboxTunnelService,
    SandboxWebviewService,
    TaskService,
    TerminalInstanceService,
    TextFileService,
    TunnelService,
    WebviewService,
)
from sandbox_core.config import ConfigResolver, SandboxConfiguration
from sandbox_core.environment import SandboxEnvironmentService
from sandbox_core.events import EventBus
from sandbox_core.errors import SeedWriteError
from sandbox_core.files import FileSystemError, InMemoryFileSystem
from sandbox_core.registry import CapabilityRegistry
from sandbox_core.resources import Resource
from sandbox_core.workspace import WorkspaceIdentifier, WorkspaceSeeder

BOOTSTRAP_EVENT = "bootstrap"


@dataclass(frozen=True)
class SandboxStatus:
    workspace: WorkspaceIdentifier
    user_data_dir: Resource
    seeded: Sequence[Resource]
    capabilities: Sequence[str]


class SandboxApp:
    """Entry point that glues the environment, virtual store, and stand-ins.

    Construction only derives locations; :meth:`bootstrap` performs the single
    run-to-completion setup and may be called repeatedly without re-binding.
    """

    def __init__(
        self,
        configuration: SandboxConfiguration | None = None,
        *,
        logger: logging.Logger | None = None,
        registry: CapabilityRegistry | None = None,
        is_windows: bool | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("sandbox_core.app")
        self.configuration = configuration or ConfigResolver().resolve()
        self.events = EventBus()
        self.registry = registry if registry is not None else CapabilityRegistry()
        self.log_level = LogLevel.parse(self.configuration.log_level)
        self.store = InMemoryFileSystem(events=self.events)
        self.environment = SandboxEnvironmentService(self.configuration, is_windows=is_windows)
        self.workspace = WorkspaceIdentifier.simple(is_windows=is_windows)
        self.seeder = WorkspaceSeeder(self.store, self.workspace.uri)
        self._status: SandboxStatus | None = None

    def bootstrap(self) -> SandboxStatus:
        if self._status is not None:
            return self._status

        try:
            self.store.mkdir(self.environment.user_data_dir)
        except FileSystemError as exc:
            raise SeedWriteError(f"unable to create {self.environment.user_data_path}") from exc
        seeded = self.seeder.seed()
        self.logger.info("seeded %d entries under %s", len(seeded), self.workspace.uri.path)

        self._register_capabilities()
        self.events.emit(BOOTSTRAP_EVENT, {"workspace": self.workspace})
        self._status = SandboxStatus(
            workspace=self.workspace,
            user_data_dir=self.environment.user_data_dir,
            seeded=seeded,
            capabilities=tuple(binding.capability.__name__ for binding in self.registry.bindings()),
        )
        return self._status

    def _build_stand_ins(self) -> tuple[tuple[type, object], ...]:
        return (
            (EnvironmentService, self.environment),
            (LogService, SandboxLogService(self.log_level, events=self.events)),
            (ExtensionService, NullExtensionService()),
            (WebviewService, SandboxWebviewService()),
            (TextFileService, SandboxTextFileService(self.store, events=self.events)),
            (TunnelService, SandboxTunnelService()),
            (TaskService, SandboxTaskService()),
            (TerminalInstanceService, SandboxTerminalInstanceService()),
        )

    def _register_capabilities(self) -> None:
        # Every stand-in is constructed before the first binding.
        stand_ins = self._build_stand_ins()
        for capability, instance in stand_ins:
            self.registry.register(capability, instance)
        self.logger.debug("bound %d capabilities", len(stand_ins))

    def status(self) -> dict[str, str]:
        status = self.bootstrap()
        return {
            "workspace_id": status.workspace.id,
            "workspace_root": str(status.workspace.uri),
            "user_data_dir": str(status.user_data_dir),
            "session_id": self.environment.session_id,
            "machine_id": self.environment.machine_id,
            "remote_authority": self.environment.remote_authority or "none",
            "entries": str(len(self.store.walk())),
            "capabilities": ", ".join(status.capabilities) or "none",
        }
