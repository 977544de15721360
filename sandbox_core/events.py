"""Event primitives shared by the virtual store and the capability stand-ins."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict

__all__ = [
    "Event",
    "EventHandler",
    "EventBus",
    "EventStream",
    "Disposable",
    "NEVER",
]


@dataclass(frozen=True)
class Event:
    """Lightweight event descriptor."""

    name: str
    payload: dict[str, Any]


EventHandler = Callable[[Event], None]


class Disposable:
    """Handle returned by subscriptions; ``dispose`` is safe to call twice."""

    def __init__(self, on_dispose: Callable[[], None] | None = None) -> None:
        self._on_dispose = on_dispose
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        if self._on_dispose is not None:
            self._on_dispose()


@dataclass(frozen=True, eq=False)
class _EventSubscription:
    handler: EventHandler


class EventBus:
    """Synchronous event bus delivering to handlers in subscription order."""

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, list[_EventSubscription]] = defaultdict(list)

    def on(self, event_name: str, handler: EventHandler) -> Disposable:
        subscription = _EventSubscription(handler)
        self._handlers[event_name].append(subscription)
        return Disposable(lambda: self._handlers[event_name].remove(subscription))

    def emit(self, event_name: str, payload: dict[str, Any]) -> None:
        event = Event(event_name, payload)
        for subscription in list(self._handlers[event_name]):
            subscription.handler(event)

    def stream(self, event_name: str) -> "EventStream":
        return EventStream(self, event_name)


class EventStream:
    """A single named event a capability exposes to subscribers."""

    def __init__(self, bus: EventBus | None, event_name: str) -> None:
        self._bus = bus
        self.name = event_name

    def subscribe(self, handler: EventHandler) -> Disposable:
        if self._bus is None:
            return Disposable()
        return self._bus.on(self.name, handler)

    __call__ = subscribe


# Subscriptions succeed but the stream never fires.
NEVER = EventStream(None, "never")
