"""afterparty: a GitHub webhook receiver library.

Register hooks on a Hub, then hand inbound requests to a Worker (or serve
the hub with ``afterparty.api.create_app``).
"""

from afterparty.errors import (
    AfterpartyError,
    BodyReadError,
    EventParseError,
    HookExecutionError,
    InvalidHeadersError,
    SignatureVerificationError,
)
from afterparty.events import Event, EventPayload, OpaqueEvent, parse_event
from afterparty.webhooks import (
    AuthenticatingHook,
    CallbackHook,
    Delivery,
    Hook,
    Hub,
    Worker,
    WorkerResponse,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "AfterpartyError",
    "BodyReadError",
    "EventParseError",
    "HookExecutionError",
    "InvalidHeadersError",
    "SignatureVerificationError",
    # Events
    "Event",
    "EventPayload",
    "OpaqueEvent",
    "parse_event",
    # Webhooks
    "AuthenticatingHook",
    "CallbackHook",
    "Delivery",
    "Hook",
    "Hub",
    "Worker",
    "WorkerResponse",
]
