"""Capability registry that the rest of the application resolves services from."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .entry import CapabilityBinding
from .errors import CapabilityCollisionError, CapabilityNotBoundError

T = TypeVar("T")


class CapabilityRegistry:
    """Map each capability interface to exactly one implementation instance.

    The registry is an explicit object handed to whoever needs lookups; there
    is no module-level instance.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._bindings: dict[type, CapabilityBinding] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, capability: type[T], instance: T) -> None:
        """Bind ``instance`` to ``capability``, raising if it is already bound."""

        binding = CapabilityBinding(capability=capability, instance=instance)
        if capability in self._bindings:
            raise CapabilityCollisionError(f"{binding.capability_id} is already bound.")
        self._bindings[capability] = binding
        self._logger.debug(
            "bound %s -> %s", binding.capability_id, type(instance).__name__
        )

    def get(self, capability: type[T]) -> T:
        binding = self._bindings.get(capability)
        if binding is None:
            raise CapabilityNotBoundError(f"{capability.__qualname__} is not bound.")
        return binding.instance

    def is_bound(self, capability: type) -> bool:
        return capability in self._bindings

    def bindings(self) -> tuple[CapabilityBinding, ...]:
        """Return all bindings ordered by capability identifier."""

        return tuple(sorted(self._bindings.values(), key=lambda binding: binding.capability_id))

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, capability: Any) -> bool:
        return capability in self._bindings
