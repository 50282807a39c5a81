"""HTTP transport: outbound via httpx, inbound via the server's /ipc endpoint."""

import asyncio
import logging
from typing import Any

import httpx

from push_bridge.core import Settings, WireMessage
from push_bridge.transports.base import BaseTransport

logger = logging.getLogger(__name__)


class HttpTransport(BaseTransport):
    """Posts wire messages to the privileged process over HTTP."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        super().__init__()
        self.client = client
        self.settings = settings
        self._pending: set[asyncio.Task] = set()
        # Held for the whole POST so messages reach the remote in send order
        self._send_lock = asyncio.Lock()

    def send(self, channel: str, payload: Any = None) -> None:
        """Schedule a POST of the message envelope and return immediately.

        Messages are posted one at a time, in the order they were sent.

        Raises:
            RuntimeError: If no event loop is running.
            pydantic_core.PydanticSerializationError: If the payload cannot be
                serialized to JSON.
        """
        if payload is None:
            message = WireMessage(channel=channel)
        else:
            message = WireMessage(channel=channel, payload=payload)
        body = message.model_dump(mode="json", exclude_unset=True)

        task = asyncio.get_running_loop().create_task(self._post(body))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every send scheduled so far to finish."""
        if self._pending:
            await asyncio.gather(*self._pending)

    async def _post(self, body: dict[str, Any]) -> None:
        channel = body["channel"]
        try:
            async with self._send_lock:
                response = await self.client.post(
                    f"{self.settings.remote_url}/ipc",
                    json=body,
                    timeout=self.settings.send_timeout,
                )
            if response.is_success:
                logger.debug(f"Sent {channel}")
            else:
                logger.warning(
                    f"Remote rejected {channel}: {response.status_code} - {response.text}"
                )
        except httpx.RequestError as e:
            logger.error(f"HTTP error sending {channel}: {e}")
