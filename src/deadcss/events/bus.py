"""Synchronous event bus for analysis lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus dispatching on the calling thread.

    A listener subscribed to an event class also receives its subclasses, so
    subscribing to :class:`~deadcss.events.types.RunEvent` covers every
    run-level event while leaving per-file :class:`FileAnalyzed` traffic out.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event_type*; returns a function that removes it."""
        listeners = self._by_type.setdefault(event_type, [])
        listeners.append(callback)

        def unsubscribe() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return unsubscribe

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: Any) -> None:
        for callback in list(self._catch_all):
            callback(event)
        # Most specific class first; each listener is called at most once.
        called: list[Listener] = []
        for cls in type(event).__mro__:
            for callback in list(self._by_type.get(cls, ())):
                if callback in called:
                    continue
                called.append(callback)
                callback(event)
