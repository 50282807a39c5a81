"""Wire channel names and the static inbound dispatch table."""

from dataclasses import dataclass
from enum import Enum

# Outbound commands (front-end -> privileged process)
REGISTER = "push-receiver.register"
LISTEN_START = "push-receiver.notifications.listen.start"
LISTEN_STOP = "push-receiver.notifications.listen.stop"


class LocalEvent(str, Enum):
    """Events raised to observers of a NotificationBridge."""

    REGISTER_SUCCESS = "register.success"
    REGISTER_ERROR = "register.error"
    LISTEN_STARTED = "notifications.listen.started"
    LISTEN_STOPPED = "notifications.listen.stopped"
    NOTIFICATION_RECEIVED = "notifications.received"
    NOTIFICATION_ERROR = "notifications.error"


@dataclass(frozen=True)
class Route:
    """Translation of one inbound channel into a local event."""

    channel: str
    event: LocalEvent
    carries_payload: bool = True


ROUTES: tuple[Route, ...] = (
    Route("push-receiver.register.success", LocalEvent.REGISTER_SUCCESS),
    Route("push-receiver.register.error", LocalEvent.REGISTER_ERROR),
    Route(
        "push-receiver.notifications.listen.started",
        LocalEvent.LISTEN_STARTED,
        carries_payload=False,
    ),
    Route(
        "push-receiver.notifications.listen.stopped",
        LocalEvent.LISTEN_STOPPED,
        carries_payload=False,
    ),
    Route("push-receiver.notifications.received", LocalEvent.NOTIFICATION_RECEIVED),
    Route("push-receiver.notifications.error", LocalEvent.NOTIFICATION_ERROR),
)

_ROUTES_BY_CHANNEL = {route.channel: route for route in ROUTES}


def route_for(channel: str) -> Route | None:
    """Return the route for an inbound channel, or None if unrecognized."""
    return _ROUTES_BY_CHANNEL.get(channel)
