"""Extension host capability with nothing installed and nothing running."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from sandbox_core.events import NEVER, EventStream


@dataclass(frozen=True)
class ExtensionDescription:
    identifier: str
    version: str
    location: str


class ExtensionService(ABC):
    @property
    @abstractmethod
    def on_did_register_extensions(self) -> EventStream: ...

    @property
    @abstractmethod
    def on_did_change_extensions_status(self) -> EventStream: ...

    @property
    @abstractmethod
    def on_did_change_extensions(self) -> EventStream: ...

    @property
    @abstractmethod
    def on_will_activate_by_event(self) -> EventStream: ...

    @property
    @abstractmethod
    def on_did_change_responsive_change(self) -> EventStream: ...

    @abstractmethod
    async def activate_by_event(self, activation_event: str) -> None: ...

    @abstractmethod
    async def when_installed_extensions_registered(self) -> bool: ...

    @abstractmethod
    async def get_extensions(self) -> Sequence[ExtensionDescription]: ...

    @abstractmethod
    async def get_extension(self, identifier: str) -> ExtensionDescription | None: ...

    @abstractmethod
    async def read_extension_point_contributions(self, extension_point: str) -> Sequence[Any]: ...

    @abstractmethod
    def get_extensions_status(self) -> Mapping[str, Any]: ...

    @abstractmethod
    async def get_inspect_port(self, try_enable_inspector: bool) -> int: ...

    @abstractmethod
    def stop_extension_hosts(self) -> None: ...

    @abstractmethod
    async def restart_extension_host(self) -> None: ...

    @abstractmethod
    async def start_extension_hosts(self) -> None: ...

    @abstractmethod
    async def set_remote_environment(self, env: Mapping[str, str | None]) -> None: ...

    @abstractmethod
    def can_add_extension(self, extension: ExtensionDescription) -> bool: ...

    @abstractmethod
    def can_remove_extension(self, extension: ExtensionDescription) -> bool: ...


class NullExtensionService(ExtensionService):
    """Reports an empty extension host whose lifecycle calls do nothing."""

    on_did_register_extensions = NEVER
    on_did_change_extensions_status = NEVER
    on_did_change_extensions = NEVER
    on_will_activate_by_event = NEVER
    on_did_change_responsive_change = NEVER

    async def activate_by_event(self, activation_event: str) -> None:
        return None

    async def when_installed_extensions_registered(self) -> bool:
        return True

    async def get_extensions(self) -> Sequence[ExtensionDescription]:
        return ()

    async def get_extension(self, identifier: str) -> ExtensionDescription | None:
        return None

    async def read_extension_point_contributions(self, extension_point: str) -> Sequence[Any]:
        return ()

    def get_extensions_status(self) -> Mapping[str, Any]:
        return {}

    async def get_inspect_port(self, try_enable_inspector: bool) -> int:
        return 0

    def stop_extension_hosts(self) -> None:
        pass

    async def restart_extension_host(self) -> None:
        pass

    async def start_extension_hosts(self) -> None:
        pass

    async def set_remote_environment(self, env: Mapping[str, str | None]) -> None:
        pass

    def can_add_extension(self, extension: ExtensionDescription) -> bool:
        return False

    def can_remove_extension(self, extension: ExtensionDescription) -> bool:
        return False
