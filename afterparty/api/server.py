"""Example webhook server.

Listens for GitHub deliveries and logs every ``star`` event. Set
``WEBHOOK_SECRET`` to only accept correctly signed deliveries.

Usage:
    AFTERPARTY_LOG=debug afterparty-server
"""

import structlog
import uvicorn

from afterparty.api.routes import create_app
from afterparty.config import Settings
from afterparty.logging import setup_logging
from afterparty.webhooks.delivery import Delivery
from afterparty.webhooks.hub import Hub

logger = structlog.get_logger(__name__)


def log_delivery(delivery: Delivery) -> None:
    """Log a received delivery."""
    sender = getattr(delivery.payload, "sender", None)
    logger.info(
        "delivery_logged",
        event_kind=delivery.event,
        delivery_id=delivery.id,
        payload_type=type(delivery.payload).__name__,
        sender=sender.login if sender is not None else None,
    )


def build_hub(settings: Settings) -> Hub:
    """Create the example hub.

    Args:
        settings: Server settings.

    Returns:
        Hub with a logging hook for star events.
    """
    hub = Hub()
    if settings.WEBHOOK_SECRET:
        hub.handle_authenticated("star", settings.WEBHOOK_SECRET, log_delivery)
    else:
        hub.register("star", log_delivery)
    return hub


def main() -> None:
    """Run the example server."""
    settings = Settings.from_env()
    setup_logging(settings.AFTERPARTY_LOG, settings.LOG_FORMAT)

    app = create_app(build_hub(settings), path=settings.WEBHOOK_PATH)

    logger.info("listening", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.AFTERPARTY_LOG.lower(),
    )


if __name__ == "__main__":
    main()
