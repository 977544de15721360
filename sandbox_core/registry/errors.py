"""Custom errors raised by the capability registry."""

from __future__ import annotations


class CapabilityRegistryError(Exception):
    """Base class for capability registry errors."""


class CapabilityCollisionError(CapabilityRegistryError):
    """Raised when a capability already has a binding."""


class CapabilityNotBoundError(CapabilityRegistryError, KeyError):
    """Raised when a capability has no binding."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
