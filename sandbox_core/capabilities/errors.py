"""Capability-specific error types."""

from __future__ import annotations


class CapabilityError(Exception):
    """Base type for capability failures."""


class CapabilityNotImplementedError(CapabilityError, NotImplementedError):
    """Raised by stand-ins for operations that need real host integration."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not implemented in the sandbox.")
        self.operation = operation
