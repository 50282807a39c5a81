"""In-process transport made of two linked ends."""

import logging
from typing import Any

from push_bridge.transports.base import BaseTransport

logger = logging.getLogger(__name__)


class MemoryTransport(BaseTransport):
    """One end of an in-process duplex channel.

    Messages sent on one end are delivered synchronously to the handlers
    registered on the other end.
    """

    def __init__(self) -> None:
        super().__init__()
        self._peer: MemoryTransport | None = None

    @classmethod
    def pair(cls) -> tuple["MemoryTransport", "MemoryTransport"]:
        """Create two ends connected to each other."""
        left, right = cls(), cls()
        left._peer = right
        right._peer = left
        return left, right

    @property
    def is_connected(self) -> bool:
        return self._peer is not None

    def send(self, channel: str, payload: Any = None) -> None:
        if self._peer is None:
            raise RuntimeError(f"Cannot send {channel}: transport is not connected")
        logger.debug(f"Sending {channel}")
        self._peer.deliver(channel, payload)
