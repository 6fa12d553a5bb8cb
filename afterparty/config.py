"""Server configuration settings.

This module provides configuration for the example webhook server using
environment variables with sensible defaults. The library itself reads no
configuration.
"""

import os
from dataclasses import dataclass

from afterparty.logging import normalize_level


def _get_int_env(name: str, default: int) -> int:
    """Get an integer value from environment variable.

    Args:
        name: Environment variable name.
        default: Default value if not set or not an integer.

    Returns:
        Integer value from environment.
    """
    value = os.getenv(name, "").strip()
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Settings:
    """Server settings loaded from environment variables.

    Attributes:
        AFTERPARTY_LOG: Logging level name from ``LEVELS``.
        LOG_FORMAT: Log renderer, "console" or "json".
        HOST: Interface to bind.
        PORT: Port to listen on.
        WEBHOOK_PATH: Path deliveries are posted to.
        WEBHOOK_SECRET: Shared secret; when set, example hooks are
            registered authenticated.
    """

    # Logging
    AFTERPARTY_LOG: str = "INFO"
    LOG_FORMAT: str = "console"

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = 4567
    WEBHOOK_PATH: str = "/"

    # Security
    WEBHOOK_SECRET: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Returns:
            Settings instance populated from environment.
        """
        return cls(
            AFTERPARTY_LOG=normalize_level(os.getenv("AFTERPARTY_LOG", "INFO")),
            LOG_FORMAT=os.getenv("LOG_FORMAT", "console"),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=_get_int_env("PORT", 4567),
            WEBHOOK_PATH=os.getenv("WEBHOOK_PATH", "/"),
            WEBHOOK_SECRET=os.getenv("WEBHOOK_SECRET") or None,
        )
