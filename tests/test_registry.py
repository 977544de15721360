"""Tests for the capability registry."""

import pytest

from sandbox_core.capabilities import (
    SandboxTunnelService,
    SandboxWebviewService,
    TunnelService,
    WebviewService,
)
from sandbox_core.registry import (
    CapabilityCollisionError,
    CapabilityNotBoundError,
    CapabilityRegistry,
)


def test_register_and_get() -> None:
    registry = CapabilityRegistry()
    tunnels = SandboxTunnelService()
    registry.register(TunnelService, tunnels)
    assert registry.get(TunnelService) is tunnels
    assert registry.is_bound(TunnelService)
    assert TunnelService in registry
    assert len(registry) == 1


def test_duplicate_registration_raises() -> None:
    registry = CapabilityRegistry()
    registry.register(TunnelService, SandboxTunnelService())
    with pytest.raises(CapabilityCollisionError):
        registry.register(TunnelService, SandboxTunnelService())


def test_unbound_capability_raises_key_error() -> None:
    registry = CapabilityRegistry()
    with pytest.raises(CapabilityNotBoundError):
        registry.get(WebviewService)
    with pytest.raises(KeyError):
        registry.get(WebviewService)


def test_instance_must_implement_the_capability() -> None:
    registry = CapabilityRegistry()
    with pytest.raises(TypeError):
        registry.register(TunnelService, SandboxWebviewService())
    assert not registry.is_bound(TunnelService)


def test_bindings_are_sorted_by_identifier() -> None:
    registry = CapabilityRegistry()
    registry.register(WebviewService, SandboxWebviewService())
    registry.register(TunnelService, SandboxTunnelService())
    identifiers = [binding.capability_id for binding in registry.bindings()]
    assert identifiers == sorted(identifiers)
    assert identifiers[0] == "sandbox_core.capabilities.tunnel:TunnelService"
