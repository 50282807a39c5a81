"""Transport protocol definition and shared handler registry."""

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

# Type alias for inbound channel handlers
ChannelHandler = Callable[[Any], None]


class Transport(Protocol):
    """Duplex named-message channel to the privileged process."""

    def send(self, channel: str, payload: Any = None) -> None:
        """Send a named message, fire-and-forget.

        Args:
            channel: Wire channel name.
            payload: Optional structured payload.
        """
        ...

    def on(self, channel: str, handler: ChannelHandler) -> None:
        """Register a handler invoked once per message arriving on ``channel``."""
        ...


class BaseTransport:
    """Per-channel handler registry shared by concrete transports."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[ChannelHandler]] = {}

    def on(self, channel: str, handler: ChannelHandler) -> None:
        self._handlers.setdefault(channel, []).append(handler)

    async def drain(self) -> None:
        """Wait for outbound sends still in flight; none by default."""

    def deliver(self, channel: str, payload: Any = None) -> None:
        """Hand an inbound message to every handler registered on its channel."""
        handlers = list(self._handlers.get(channel, ()))
        logger.debug(f"Delivering {channel} to {len(handlers)} handler(s)")
        for handler in handlers:
            handler(payload)
