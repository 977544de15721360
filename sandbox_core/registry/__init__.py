"""Convenience exports for the capability registry."""

from .entry import CapabilityBinding
from .errors import (
    CapabilityCollisionError,
    CapabilityNotBoundError,
    CapabilityRegistryError,
)
from .registry import CapabilityRegistry

__all__ = [
    "CapabilityRegistry",
    "CapabilityBinding",
    "CapabilityRegistryError",
    "CapabilityCollisionError",
    "CapabilityNotBoundError",
]
