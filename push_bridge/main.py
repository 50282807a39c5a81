"""
Push Bridge - Entry point.

Hosts a NotificationBridge in the front-end process and relays push-receiver
commands and events to and from the privileged process over HTTP.
"""

import logging

from push_bridge.core import Settings
from push_bridge.server import app

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the server."""
    import uvicorn

    settings = Settings()
    logger.info(f"Push bridge relaying to {settings.remote_url}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
