"""Synchronous event bus the compiler reports its phases on."""

from __future__ import annotations

from typing import Any, Callable

Callback = Callable[[Any], None]


class EventBus:
    """Dispatches compiler events to subscribers, in registration order.

    Catch-all listeners (see :meth:`on_all`) run before typed ones.  A
    listener that raises aborts the compilation that emitted the event.
    """

    def __init__(self) -> None:
        self._typed: dict[type, list[Callback]] = {}
        self._catch_all: list[Callback] = []

    def subscribe(self, event_type: type, callback: Callback) -> Callable[[], None]:
        """Call *callback* for every event of exactly *event_type*.

        Returns a function that removes the subscription again.
        """
        self._typed.setdefault(event_type, []).append(callback)
        return lambda: self._typed[event_type].remove(callback)

    def on_all(self, callback: Callback) -> Callable[[], None]:
        self._catch_all.append(callback)
        return lambda: self._catch_all.remove(callback)

    def emit(self, event: Any) -> None:
        for callback in [*self._catch_all, *self._typed.get(type(event), [])]:
            callback(event)
