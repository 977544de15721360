"""Binding descriptor pairing a capability interface with its instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CapabilityBinding:
    """Immutable ``(capability, instance)`` pair held by the registry."""

    capability: type
    instance: Any

    def __post_init__(self) -> None:
        if not isinstance(self.capability, type):
            raise TypeError("capability must be an interface type.")
        if not isinstance(self.instance, self.capability):
            raise TypeError(
                f"{type(self.instance).__name__} does not implement {self.capability.__name__}."
            )

    @property
    def capability_id(self) -> str:
        """Return the ``module:Interface`` identifier for this binding."""

        return f"{self.capability.__module__}:{self.capability.__qualname__}"
