"""Inbound webhook handling.

This module provides:
- Delivery: one decoded webhook notification
- Hook, CallbackHook, AuthenticatingHook: delivery handlers
- Hub: registry of hooks by event kind, with "*" wildcard subscriptions
- Worker: per-request validation, decoding and dispatch
- HMAC-SHA1 signature helpers
"""

from afterparty.webhooks.delivery import Delivery
from afterparty.webhooks.hooks import AuthenticatingHook, CallbackHook, Hook, as_hook
from afterparty.webhooks.hub import WILDCARD, Hub
from afterparty.webhooks.security import (
    SIGNATURE_PREFIX,
    generate_signature,
    require_signature,
    verify_signature,
)
from afterparty.webhooks.worker import (
    DELIVERY_HEADER,
    EVENT_HEADER,
    SIGNATURE_HEADER,
    DeliveryHeaders,
    Worker,
    WorkerResponse,
)

__all__ = [
    # Delivery
    "Delivery",
    # Hooks
    "AuthenticatingHook",
    "CallbackHook",
    "Hook",
    "as_hook",
    # Hub
    "WILDCARD",
    "Hub",
    # Worker
    "DELIVERY_HEADER",
    "EVENT_HEADER",
    "SIGNATURE_HEADER",
    "DeliveryHeaders",
    "Worker",
    "WorkerResponse",
    # Security
    "SIGNATURE_PREFIX",
    "generate_signature",
    "require_signature",
    "verify_signature",
]
