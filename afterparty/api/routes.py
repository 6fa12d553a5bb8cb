"""FastAPI application serving a Hub.

This module provides:
- POST {path}: webhook delivery endpoint
- GET /health: liveness check reporting registered event kinds
- Mapping of hook failures to a 500 response
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from afterparty.errors import HookExecutionError
from afterparty.webhooks.hub import Hub
from afterparty.webhooks.worker import Worker

logger = structlog.get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Service status")
    event_kinds: int = Field(..., description="Number of registered event kinds")
    events: list[str] = Field(default_factory=list, description="Registered event kinds")


def create_app(
    hub: Hub,
    *,
    path: str = "/",
    title: str = "afterparty",
    version: str = "0.1.0",
) -> FastAPI:
    """Create a FastAPI application that dispatches deliveries to a hub.

    Args:
        hub: Registry of hooks to dispatch to.
        path: Path deliveries are posted to.
        title: API title.
        version: API version.

    Returns:
        Configured FastAPI application.
    """
    worker = Worker(hub)
    app = FastAPI(title=title, version=version, docs_url=None, redoc_url=None)
    app.state.worker = worker

    @app.exception_handler(HookExecutionError)
    async def hook_failure_handler(
        request: Request, exc: HookExecutionError  # noqa: ARG001
    ) -> PlainTextResponse:
        logger.error(
            "delivery_hook_failed",
            event_kind=exc.event,
            delivery_id=exc.delivery_id,
            hook=exc.hook,
        )
        return PlainTextResponse("hook failed", status_code=500)

    @app.post(path, response_class=PlainTextResponse, tags=["Webhooks"])
    async def receive_delivery(request: Request) -> PlainTextResponse:
        """Receive one webhook delivery."""
        response = await worker.process_async(request.headers, request.stream())
        return PlainTextResponse(response.body, status_code=response.status_code)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        """Report the registered event kinds."""
        return HealthResponse(event_kinds=hub.size(), events=hub.events())

    return app
