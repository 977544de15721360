"""Port-forwarding capability; no tunnel can ever be opened in the sandbox."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from sandbox_core.events import NEVER, Disposable, EventStream
from sandbox_core.resources import Resource


@dataclass(frozen=True)
class RemoteTunnel:
    tunnel_remote_host: str
    tunnel_remote_port: int
    local_address: str
    public: bool = False


@dataclass(frozen=True)
class TunnelProviderFeatures:
    elevation: bool = False
    public: bool = False


class TunnelService(ABC):
    can_elevate: bool
    can_make_public: bool

    @property
    @abstractmethod
    def on_tunnel_opened(self) -> EventStream: ...

    @property
    @abstractmethod
    def on_tunnel_closed(self) -> EventStream: ...

    @abstractmethod
    async def get_tunnels(self) -> tuple[RemoteTunnel, ...]: ...

    @abstractmethod
    def can_tunnel(self, uri: Resource) -> bool: ...

    @abstractmethod
    async def open_tunnel(
        self,
        address_provider: Any | None,
        remote_host: str | None,
        remote_port: int,
        local_port: int | None = None,
    ) -> RemoteTunnel | None: ...

    @abstractmethod
    async def change_tunnel_privacy(
        self, remote_host: str, remote_port: int, is_public: bool
    ) -> RemoteTunnel | None: ...

    @abstractmethod
    async def close_tunnel(self, remote_host: str, remote_port: int) -> None: ...

    @abstractmethod
    def set_tunnel_provider(
        self, provider: Any | None, features: TunnelProviderFeatures
    ) -> Disposable: ...


class SandboxTunnelService(TunnelService):
    """Reports no tunnels and declines every request without raising."""

    can_elevate = False
    can_make_public = False
    on_tunnel_opened = NEVER
    on_tunnel_closed = NEVER

    def __init__(self) -> None:
        self._tunnels: tuple[RemoteTunnel, ...] = ()

    async def get_tunnels(self) -> tuple[RemoteTunnel, ...]:
        return self._tunnels

    def can_tunnel(self, uri: Resource) -> bool:
        return False

    async def open_tunnel(
        self,
        address_provider: Any | None,
        remote_host: str | None,
        remote_port: int,
        local_port: int | None = None,
    ) -> RemoteTunnel | None:
        return None

    async def change_tunnel_privacy(
        self, remote_host: str, remote_port: int, is_public: bool
    ) -> RemoteTunnel | None:
        return None

    async def close_tunnel(self, remote_host: str, remote_port: int) -> None:
        return None

    def set_tunnel_provider(
        self, provider: Any | None, features: TunnelProviderFeatures
    ) -> Disposable:
        return Disposable()
