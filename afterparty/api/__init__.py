"""HTTP surface for serving a Hub.

This module contains:
- create_app: FastAPI application factory
- The example server entry point (afterparty.api.server)
"""

from afterparty.api.routes import HealthResponse, create_app

__all__ = [
    "HealthResponse",
    "create_app",
]
