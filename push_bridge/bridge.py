"""NotificationBridge: wire messages in and out, local events up."""

import logging
from functools import partial
from typing import Any

from push_bridge.channels import LISTEN_START, LISTEN_STOP, REGISTER, ROUTES, Route
from push_bridge.events import Callback, EventEmitter
from push_bridge.transports.base import Transport

logger = logging.getLogger(__name__)


class NotificationBridge:
    """Front-end side of the push-receiver channel protocol.

    Commands are sent to the privileged process, which registers with the
    push provider and listens for notifications. Its results come back as
    wire messages and are raised here as local events:

    - ``register.success`` / ``register.error``
    - ``notifications.listen.started`` / ``notifications.listen.stopped``
    - ``notifications.received`` / ``notifications.error``

    The bridge keeps no protocol state; every call sends one message and
    every inbound message raises one event.
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self._events = EventEmitter()

        for route in ROUTES:
            transport.on(route.channel, partial(self._relay, route))

    def _relay(self, route: Route, payload: Any = None) -> None:
        if route.carries_payload:
            self._events.emit(route.event, payload)
        else:
            self._events.emit(route.event)

    def on(self, event: str, callback: Callback) -> None:
        self._events.on(event, callback)

    def once(self, event: str, callback: Callback) -> None:
        self._events.once(event, callback)

    def off(self, event: str, callback: Callback) -> None:
        self._events.off(event, callback)

    def listeners(self, event: str) -> list[Callback]:
        return self._events.listeners(event)

    def listener_count(self, event: str) -> int:
        return self._events.listener_count(event)

    def remove_all_listeners(self, event: str | None = None) -> None:
        """Release observer registrations for one event, or for all events."""
        self._events.remove_all_listeners(event)

    def register(self, sender_id: str) -> None:
        """Ask the privileged process to register a device for ``sender_id``.

        Events raised later: ``register.success``, ``register.error``.
        """
        logger.debug(f"Requesting registration for sender {sender_id}")
        self.transport.send(REGISTER, {"senderId": sender_id})

    def start_listening_for_notifications(
        self, credentials: Any, persistent_ids: list[str]
    ) -> None:
        """Ask the privileged process to start listening for notifications.

        Args:
            credentials: Credentials from a successful registration.
            persistent_ids: Ids of notifications already received, passed
                through as-is so they are not delivered again.

        Events raised later: ``notifications.listen.started``,
        ``notifications.received``, ``notifications.error``.
        """
        self.transport.send(
            LISTEN_START,
            {"credentials": credentials, "persistentIds": persistent_ids},
        )

    def stop_listening_for_notifications(self) -> None:
        """Ask the privileged process to stop listening.

        Event raised later: ``notifications.listen.stopped``.
        """
        self.transport.send(LISTEN_STOP)
