"""Core module: Settings, WireMessage, and EventForwarder."""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application configuration with environment variable support."""

    remote_url: str = "http://localhost:9100"
    event_sink_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 9101
    send_timeout: float = 10.0

    model_config = {"env_file": ".env", "extra": "ignore"}


class WireMessage(BaseModel):
    """A named message travelling between the two processes."""

    channel: str
    payload: Any = None


class EventForwarder:
    """Forwards bridge events to a downstream HTTP sink."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def forward(self, event: str, payload: Any = None) -> None:
        """Post one raised event to ``{event_sink_url}/events``."""
        if not self.settings.event_sink_url:
            return

        body = {
            "event": event,
            "payload": payload,
            "received_at": datetime.now(timezone.utc).isoformat(),
        }

        try:
            response = await self.client.post(
                f"{self.settings.event_sink_url}/events",
                json=body,
            )
            if response.is_success:
                logger.info(f"Forwarded event: {event}")
            else:
                logger.warning(
                    f"Failed to forward event: {response.status_code} - {response.text}"
                )
        except httpx.RequestError as e:
            logger.error(f"HTTP error forwarding event: {e}")
