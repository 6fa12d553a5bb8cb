"""Per-request delivery processing.

A Worker turns one inbound request into a Delivery and runs the hooks a Hub
resolves for it:

    headers validated -> hooks resolved -> body read -> payload parsed
        -> hooks dispatched -> response

Every stage before dispatch can end the request early with a terminal
response. Hook failures are not turned into responses; they propagate to the
caller as ``HookExecutionError``.
"""

import asyncio
from collections.abc import AsyncIterable, Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from http import HTTPStatus

import structlog

from afterparty.errors import (
    BodyReadError,
    EventParseError,
    HookExecutionError,
    InvalidHeadersError,
)
from afterparty.webhooks.delivery import Delivery
from afterparty.webhooks.hooks import Hook
from afterparty.webhooks.hub import Hub

logger = structlog.get_logger(__name__)

# GitHub delivery headers, see https://docs.github.com/webhooks
EVENT_HEADER = "X-GitHub-Event"
DELIVERY_HEADER = "X-GitHub-Delivery"
SIGNATURE_HEADER = "X-Hub-Signature"

BodySource = bytes | Iterable[bytes] | Callable[[], bytes]
AsyncBodySource = bytes | AsyncIterable[bytes] | Callable[[], Awaitable[bytes]]


@dataclass(frozen=True)
class WorkerResponse:
    """Status and plain-text body to send back to the sender."""

    status_code: int
    body: str


INVALID_HEADERS = WorkerResponse(HTTPStatus.BAD_REQUEST, "invalid request headers")
NO_HOOK_CONFIGURED = WorkerResponse(HTTPStatus.ACCEPTED, "no hook configured")
BODY_UNREADABLE = WorkerResponse(HTTPStatus.BAD_REQUEST, "failed to read body")
PARSE_FAILED = WorkerResponse(HTTPStatus.BAD_REQUEST, "failed to parse event")
OK = WorkerResponse(HTTPStatus.OK, "OK")


@dataclass(frozen=True)
class DeliveryHeaders:
    """Delivery metadata read from request headers."""

    event: str
    delivery_id: str
    signature: str | None = None


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up a header by name, ignoring case.

    Args:
        headers: Request headers. Case-insensitive mappings are used as is.
        name: Header name.

    Returns:
        Header value if present.
    """
    value = headers.get(name)
    if value is not None:
        return value

    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


class Worker:
    """Processes webhook requests against a Hub.

    Workers keep no per-request state, so one instance can serve any number
    of concurrent requests.
    """

    def __init__(self, hub: Hub) -> None:
        """Initialize the worker.

        Args:
            hub: Registry used to resolve interested hooks.
        """
        self._hub = hub
        self._logger = logger.bind(component="worker")

    @property
    def hub(self) -> Hub:
        return self._hub

    def read_headers(self, headers: Mapping[str, str]) -> DeliveryHeaders:
        """Extract delivery metadata from request headers.

        Args:
            headers: Request headers.

        Returns:
            Event kind, delivery id and optional signature.

        Raises:
            InvalidHeadersError: If the event or delivery header is missing,
                empty or not text.
        """
        values = {}
        for name in (EVENT_HEADER, DELIVERY_HEADER):
            value = get_header(headers, name)
            if isinstance(value, bytes):
                try:
                    value = value.decode("ascii")
                except UnicodeDecodeError as e:
                    raise InvalidHeadersError(
                        f"Header {name} is not valid text", header=name
                    ) from e
            if not isinstance(value, str) or not value.strip():
                raise InvalidHeadersError(f"Missing {name} header", header=name)
            # ASGI servers decode raw header bytes as latin-1
            if not (value.isascii() and value.isprintable()):
                raise InvalidHeadersError(f"Header {name} is not valid text", header=name)
            values[name] = value

        signature = get_header(headers, SIGNATURE_HEADER)
        if isinstance(signature, bytes):
            signature = signature.decode("latin-1")

        return DeliveryHeaders(
            event=values[EVENT_HEADER],
            delivery_id=values[DELIVERY_HEADER],
            signature=signature,
        )

    def hooks(self, event: str) -> list[Hook] | None:
        """Get all hooks interested in an event kind."""
        self._logger.debug("resolving_hooks", event_kind=event)
        return self._hub.resolve(event)

    def read_body(self, body: BodySource) -> str:
        """Read a complete request body as text.

        Invalid UTF-8 sequences are replaced rather than rejected.

        Args:
            body: Raw bytes, an iterable of byte chunks, or a callable
                returning the bytes.

        Returns:
            Decoded body text.

        Raises:
            BodyReadError: If reading the body fails.
        """
        try:
            if callable(body):
                data = body()
            elif isinstance(body, bytes | bytearray):
                data = bytes(body)
            else:
                data = b"".join(body)
        except Exception as e:
            raise BodyReadError(f"Failed to read request body: {e}") from e

        return _decode(data)

    async def read_body_async(self, body: AsyncBodySource) -> str:
        """Read a complete request body from an async source.

        Args:
            body: Raw bytes, an async iterable of byte chunks, or a callable
                returning an awaitable of the bytes.

        Returns:
            Decoded body text.

        Raises:
            BodyReadError: If reading the body fails.
        """
        try:
            if callable(body):
                data = await body()
            elif isinstance(body, bytes | bytearray):
                data = bytes(body)
            else:
                data = b"".join([chunk async for chunk in body])
        except Exception as e:
            raise BodyReadError(f"Failed to read request body: {e}") from e

        return _decode(data)

    def deliver(self, hooks: list[Hook], delivery: Delivery) -> None:
        """Run hooks for a delivery, strictly in order.

        Args:
            hooks: Resolved hooks.
            delivery: Delivery to hand to each hook.

        Raises:
            HookExecutionError: If a hook raises. Later hooks do not run.
        """
        for hook in hooks:
            try:
                hook.handle(delivery)
            except Exception as e:
                self._logger.error(
                    "hook_failed",
                    event_kind=delivery.event,
                    delivery_id=delivery.id,
                    hook=repr(hook),
                    error=str(e),
                )
                raise HookExecutionError(
                    f"Hook {hook!r} failed: {e}",
                    event=delivery.event,
                    delivery_id=delivery.id,
                    hook=repr(hook),
                ) from e

    def process(self, headers: Mapping[str, str], body: BodySource) -> WorkerResponse:
        """Handle one webhook request.

        The body is only read once hooks are known to be interested, so a
        lazy body source (iterable or callable) is never consumed for
        unconfigured events.

        Args:
            headers: Request headers.
            body: Request body source.

        Returns:
            Response to send back.

        Raises:
            HookExecutionError: If a hook raises.
        """
        meta = self._validate(headers)
        if isinstance(meta, WorkerResponse):
            return meta

        hooks = self.hooks(meta.event)
        if hooks is None:
            return self._no_hooks(meta)

        try:
            text = self.read_body(body)
        except BodyReadError as e:
            return self._body_failed(meta, e)

        return self._dispatch(meta, hooks, text)

    async def process_async(
        self,
        headers: Mapping[str, str],
        body: AsyncBodySource,
    ) -> WorkerResponse:
        """Handle one webhook request from an event loop.

        Parsing and hook execution run in a worker thread so slow hooks do
        not block other requests on the loop.

        Args:
            headers: Request headers.
            body: Async request body source.

        Returns:
            Response to send back.

        Raises:
            HookExecutionError: If a hook raises.
        """
        meta = self._validate(headers)
        if isinstance(meta, WorkerResponse):
            return meta

        hooks = self.hooks(meta.event)
        if hooks is None:
            return self._no_hooks(meta)

        try:
            text = await self.read_body_async(body)
        except BodyReadError as e:
            return self._body_failed(meta, e)

        return await asyncio.to_thread(self._dispatch, meta, hooks, text)

    def _validate(self, headers: Mapping[str, str]) -> DeliveryHeaders | WorkerResponse:
        try:
            meta = self.read_headers(headers)
        except InvalidHeadersError as e:
            self._logger.error("invalid_request_headers", header=e.header, error=e.message)
            return INVALID_HEADERS

        self._logger.info(
            "delivery_received",
            event_kind=meta.event,
            delivery_id=meta.delivery_id,
            signed=meta.signature is not None,
        )
        return meta

    def _no_hooks(self, meta: DeliveryHeaders) -> WorkerResponse:
        self._logger.warning(
            "no_hook_configured",
            event_kind=meta.event,
            delivery_id=meta.delivery_id,
        )
        return NO_HOOK_CONFIGURED

    def _body_failed(self, meta: DeliveryHeaders, error: BodyReadError) -> WorkerResponse:
        self._logger.error(
            "body_read_failed",
            event_kind=meta.event,
            delivery_id=meta.delivery_id,
            error=error.message,
        )
        return BODY_UNREADABLE

    def _dispatch(
        self,
        meta: DeliveryHeaders,
        hooks: list[Hook],
        text: str,
    ) -> WorkerResponse:
        try:
            delivery = Delivery.parse(meta.delivery_id, meta.event, text, meta.signature)
        except EventParseError as e:
            self._logger.error(
                "delivery_parse_failed",
                event_kind=meta.event,
                delivery_id=meta.delivery_id,
                reason=e.reason,
            )
            return PARSE_FAILED

        self.deliver(hooks, delivery)

        self._logger.info(
            "delivery_dispatched",
            event_kind=meta.event,
            delivery_id=meta.delivery_id,
            hook_count=len(hooks),
        )
        return OK


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
