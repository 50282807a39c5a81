"""Transports connecting the bridge to the privileged process."""

from push_bridge.transports.base import BaseTransport, ChannelHandler, Transport
from push_bridge.transports.http import HttpTransport
from push_bridge.transports.memory import MemoryTransport

__all__ = [
    "BaseTransport",
    "ChannelHandler",
    "HttpTransport",
    "MemoryTransport",
    "Transport",
]
