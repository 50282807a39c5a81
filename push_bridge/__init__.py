"""Bridge between local observers and a remote push-receiver service."""

from push_bridge.bridge import NotificationBridge
from push_bridge.channels import ROUTES, LocalEvent, Route, route_for
from push_bridge.events import EventEmitter
from push_bridge.transports import HttpTransport, MemoryTransport, Transport

__all__ = [
    "EventEmitter",
    "HttpTransport",
    "LocalEvent",
    "MemoryTransport",
    "NotificationBridge",
    "ROUTES",
    "Route",
    "Transport",
    "route_for",
]
