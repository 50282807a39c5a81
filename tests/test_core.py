"""Tests for core module (Settings, WireMessage, EventForwarder)."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from push_bridge.core import EventForwarder, Settings, WireMessage


class TestSettings:
    """Tests for Settings configuration."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.remote_url == "http://localhost:9100"
        assert settings.event_sink_url is None
        assert settings.host == "0.0.0.0"
        assert settings.port == 9101
        assert settings.send_timeout == 10.0

    def test_settings_from_env(self, monkeypatch):
        """Test settings can be overridden via environment variables."""
        monkeypatch.setenv("REMOTE_URL", "http://main-process:7000")
        monkeypatch.setenv("EVENT_SINK_URL", "http://sink:8000")
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9999")
        monkeypatch.setenv("SEND_TIMEOUT", "2.5")

        settings = Settings()
        assert settings.remote_url == "http://main-process:7000"
        assert settings.event_sink_url == "http://sink:8000"
        assert settings.host == "127.0.0.1"
        assert settings.port == 9999
        assert settings.send_timeout == 2.5


class TestWireMessage:
    """Tests for the WireMessage envelope."""

    def test_payload_defaults_to_none(self):
        """Test that a message can be created without a payload."""
        message = WireMessage(channel="push-receiver.notifications.listen.stop")
        assert message.payload is None
        assert message.model_dump(exclude_unset=True) == {
            "channel": "push-receiver.notifications.listen.stop"
        }

    def test_payload_is_not_validated(self):
        """Test that any JSON payload shape is accepted."""
        message = WireMessage.model_validate(
            {"channel": "push-receiver.register.error", "payload": ["odd", 1, None]}
        )
        assert message.payload == ["odd", 1, None]


class TestEventForwarder:
    """Tests for EventForwarder."""

    @pytest.fixture
    def settings(self):
        """Create test settings with an event sink."""
        return Settings(event_sink_url="http://sink:8000")

    @pytest.fixture
    def mock_client(self):
        """Create a mock HTTP client."""
        return AsyncMock(spec=httpx.AsyncClient)

    @pytest.fixture
    def forwarder(self, mock_client, settings):
        """Create an EventForwarder instance."""
        return EventForwarder(client=mock_client, settings=settings)

    @pytest.mark.asyncio
    async def test_forward_success(self, forwarder, mock_client):
        """Test successful event forwarding."""
        mock_client.post.return_value = MagicMock(is_success=True, status_code=202)

        await forwarder.forward("notifications.received", {"id": "n1"})

        mock_client.post.assert_called_once()
        call_args = mock_client.post.call_args
        assert call_args[0][0] == "http://sink:8000/events"
        body = call_args[1]["json"]
        assert body["event"] == "notifications.received"
        assert body["payload"] == {"id": "n1"}
        assert "received_at" in body

    @pytest.mark.asyncio
    async def test_forward_without_payload(self, forwarder, mock_client):
        """Test that payload-less events are forwarded with a null payload."""
        mock_client.post.return_value = MagicMock(is_success=True, status_code=202)

        await forwarder.forward("notifications.listen.started")

        assert mock_client.post.call_args[1]["json"]["payload"] is None

    @pytest.mark.asyncio
    async def test_forward_skipped_without_sink(self, mock_client):
        """Test that nothing is posted when no sink is configured."""
        forwarder = EventForwarder(client=mock_client, settings=Settings())

        await forwarder.forward("register.success", {"token": "t"})

        mock_client.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_forward_handles_http_error(self, forwarder, mock_client):
        """Test that error statuses are handled gracefully."""
        mock_response = MagicMock(is_success=False, status_code=500)
        mock_response.text = "Internal Server Error"
        mock_client.post.return_value = mock_response

        # Should not raise, just log warning
        await forwarder.forward("register.error", {"reason": "x"})
        mock_client.post.assert_called_once()

    @pytest.mark.asyncio
    async def test_forward_handles_network_error(self, forwarder, mock_client):
        """Test that network errors are handled gracefully."""
        mock_client.post.side_effect = httpx.RequestError("Connection refused")

        # Should not raise, just log error
        await forwarder.forward("notifications.error", {"reason": "x"})
