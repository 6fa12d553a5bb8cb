"""Decoding of raw delivery bodies into event payloads."""

import json

import structlog
from pydantic import ValidationError

from afterparty.errors import EventParseError
from afterparty.events.patch import patch_payload_json
from afterparty.events.payloads import (
    EVENT_ADAPTER,
    KNOWN_EVENTS,
    EventPayload,
    OpaqueEvent,
)

logger = structlog.get_logger(__name__)


def parse_event(event: str, payload: str) -> EventPayload:
    """Decode a delivery body for the given event kind.

    Known kinds are patched and validated into their typed model. Any other
    kind yields an ``OpaqueEvent`` holding ``payload`` unmodified, as long as
    the body is well-formed JSON.

    Args:
        event: Event kind from the delivery headers.
        payload: Raw JSON text of the delivery body.

    Returns:
        Typed payload, or an opaque payload for unknown kinds.

    Raises:
        EventParseError: If the body is malformed JSON or does not match the
            model for a known kind.
    """
    patched = patch_payload_json(event, payload)

    if event not in KNOWN_EVENTS:
        try:
            json.loads(patched)
        except ValueError as e:
            _log_failure(event, str(e), patched)
            raise EventParseError(
                f"Malformed JSON for event '{event}'",
                event=event,
                reason=str(e),
            ) from e
        return OpaqueEvent(event=event, raw=payload)

    try:
        return EVENT_ADAPTER.validate_json(patched)
    except ValidationError as e:
        reason = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        _log_failure(event, reason, patched)
        raise EventParseError(
            f"Failed to parse '{event}' payload",
            event=event,
            reason=reason,
            details={"error_count": e.error_count()},
        ) from e


def _log_failure(event: str, reason: str, patched: str) -> None:
    logger.error(
        "event_parse_failed",
        event_kind=event,
        reason=reason,
        patched_payload=patched,
    )
