"""Terminal instance factory; no shell process can be started in the sandbox."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from sandbox_core.events import NEVER, EventStream

from .errors import CapabilityNotImplementedError


@dataclass(frozen=True)
class ShellLaunchConfig:
    name: str | None = None
    executable: str | None = None
    args: tuple[str, ...] = ()
    cwd: str | None = None
    env: Mapping[str, str] = field(default_factory=dict)


class TerminalInstanceService(ABC):
    @property
    @abstractmethod
    def on_did_create_instance(self) -> EventStream: ...

    @abstractmethod
    def create_instance(self, launch_config: ShellLaunchConfig) -> Any: ...

    @abstractmethod
    async def get_default_shell_and_args(self, use_automation_shell: bool) -> tuple[str, tuple[str, ...]]: ...

    @abstractmethod
    def create_windows_shell_helper(self, shell_process_id: int) -> Any: ...

    @abstractmethod
    async def prepare_path_for_terminal(self, path: str, executable: str | None, title: str) -> str: ...

    @abstractmethod
    async def get_main_process_parent_env(self) -> Mapping[str, str]: ...


class SandboxTerminalInstanceService(TerminalInstanceService):
    on_did_create_instance = NEVER

    def create_instance(self, launch_config: ShellLaunchConfig) -> Any:
        raise CapabilityNotImplementedError("create_instance")

    async def get_default_shell_and_args(self, use_automation_shell: bool) -> tuple[str, tuple[str, ...]]:
        raise CapabilityNotImplementedError("get_default_shell_and_args")

    def create_windows_shell_helper(self, shell_process_id: int) -> Any:
        raise CapabilityNotImplementedError("create_windows_shell_helper")

    async def prepare_path_for_terminal(self, path: str, executable: str | None, title: str) -> str:
        return path

    async def get_main_process_parent_env(self) -> Mapping[str, str]:
        return {}
