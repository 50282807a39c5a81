"""Observer registry: named events mapped to ordered callback lists."""

import logging
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


def _key(event: str) -> str:
    # LocalEvent members and plain strings share one registration list
    return event.value if isinstance(event, Enum) else event


class _Once:
    """Callback wrapper that unsubscribes itself before the first call."""

    def __init__(self, emitter: "EventEmitter", event: str, callback: Callback):
        self.emitter = emitter
        self.event = event
        self.callback = callback

    def __call__(self, *args: Any) -> Any:
        self.emitter.off(self.event, self)
        return self.callback(*args)


def _unwrap(callback: Callback) -> Callback:
    return callback.callback if isinstance(callback, _Once) else callback


class EventEmitter:
    """Many observers per named event, invoked in registration order."""

    def __init__(self) -> None:
        self._observers: dict[str, list[Callback]] = {}

    def on(self, event: str, callback: Callback) -> None:
        """Subscribe a callback to an event."""
        self._observers.setdefault(_key(event), []).append(callback)

    def once(self, event: str, callback: Callback) -> None:
        """Subscribe a callback that is removed before its first call."""
        self.on(event, _Once(self, event, callback))

    def off(self, event: str, callback: Callback) -> None:
        """Unsubscribe the most recent registration of a callback.

        Unknown callbacks are ignored. A callback added with ``once`` can be
        removed by passing the original callback.
        """
        key = _key(event)
        observers = self._observers.get(key)
        if not observers:
            return

        for index in range(len(observers) - 1, -1, -1):
            registered = observers[index]
            if registered is callback or _unwrap(registered) is callback:
                del observers[index]
                break

        if not observers:
            del self._observers[key]

    def emit(self, event: str, *args: Any) -> bool:
        """Invoke every observer of ``event`` with ``args``.

        Observers added or removed while emitting take effect on the next
        emit. An observer that raises is logged and the remaining observers
        still run.

        Returns:
            True if the event had at least one observer.
        """
        key = _key(event)
        observers = list(self._observers.get(key, ()))
        for callback in observers:
            try:
                callback(*args)
            except Exception:
                logger.exception(f"Observer for {key} raised")
        return bool(observers)

    def listeners(self, event: str) -> list[Callback]:
        """Return a copy of the callbacks subscribed to an event."""
        return [_unwrap(callback) for callback in self._observers.get(_key(event), ())]

    def listener_count(self, event: str) -> int:
        return len(self._observers.get(_key(event), ()))

    def remove_all_listeners(self, event: str | None = None) -> None:
        """Drop every observer of one event, or of all events."""
        if event is None:
            self._observers.clear()
        else:
            self._observers.pop(_key(event), None)
