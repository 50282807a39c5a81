"""FastAPI server module."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from push_bridge.bridge import NotificationBridge
from push_bridge.channels import ROUTES, LocalEvent, route_for
from push_bridge.core import EventForwarder, Settings, WireMessage
from push_bridge.transports import HttpTransport

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Global state
settings = Settings()
transport: HttpTransport | None = None
bridge: NotificationBridge | None = None
_background: set[asyncio.Task] = set()


class RegisterRequest(BaseModel):
    sender_id: str = Field(alias="senderId")


class ListenStartRequest(BaseModel):
    credentials: Any
    persistent_ids: list[str] = Field(default_factory=list, alias="persistentIds")


def _forward_done(task: asyncio.Task) -> None:
    _background.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logger.error(f"Event forwarding failed: {task.exception()!r}")


def _make_observer(event: LocalEvent, forwarder: EventForwarder):
    """Build the observer that logs an event and forwards it to the sink."""

    def observer(*args: Any) -> None:
        payload = args[0] if args else None
        logger.info(f"Bridge event: {event.value}")
        if settings.event_sink_url:
            task = asyncio.get_running_loop().create_task(
                forwarder.forward(event.value, payload)
            )
            _background.add(task)
            task.add_done_callback(_forward_done)

    return observer


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global transport, bridge

    async with httpx.AsyncClient() as client:
        forwarder = EventForwarder(client=client, settings=settings)
        transport = HttpTransport(client=client, settings=settings)
        bridge = NotificationBridge(transport)

        for event in LocalEvent:
            bridge.on(event, _make_observer(event, forwarder))

        try:
            yield
            await transport.drain()
            if _background:
                await asyncio.gather(*_background, return_exceptions=True)
        finally:
            bridge.remove_all_listeners()
            bridge = None
            transport = None


app = FastAPI(
    title="Push Bridge",
    description="Relays push-receiver commands and events between processes.",
    version="0.1.0",
    lifespan=lifespan,
)


def _require_bridge() -> NotificationBridge:
    if bridge is None:
        raise HTTPException(status_code=503, detail="Bridge is not running")
    return bridge


def _require_transport() -> HttpTransport:
    if transport is None:
        raise HTTPException(status_code=503, detail="Bridge is not running")
    return transport


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "bridge_ready": str(bridge is not None),
    }


@app.get("/status")
async def status() -> dict[str, Any]:
    """Get bridge status."""
    return {
        "running": bridge is not None,
        "remote_url": settings.remote_url,
        "event_sink_url": settings.event_sink_url,
        "inbound_channels": [route.channel for route in ROUTES],
    }


@app.post("/ipc", status_code=202)
async def receive_message(message: WireMessage) -> dict[str, bool]:
    """Accept a wire message from the privileged process."""
    inbound = _require_transport()
    if route_for(message.channel) is None:
        logger.debug(f"Ignoring unrecognized channel: {message.channel}")
    inbound.deliver(message.channel, message.payload)
    return {"accepted": True}


@app.post("/register", status_code=202)
async def register(request: RegisterRequest) -> dict[str, bool]:
    """Request device registration for a sender id."""
    _require_bridge().register(request.sender_id)
    return {"accepted": True}


@app.post("/notifications/listen/start", status_code=202)
async def start_listening(request: ListenStartRequest) -> dict[str, bool]:
    """Request the privileged process to start listening."""
    _require_bridge().start_listening_for_notifications(
        request.credentials, request.persistent_ids
    )
    return {"accepted": True}


@app.post("/notifications/listen/stop", status_code=202)
async def stop_listening() -> dict[str, bool]:
    """Request the privileged process to stop listening."""
    _require_bridge().stop_listening_for_notifications()
    return {"accepted": True}
