"""Hooks: handlers that react to deliveries.

A hook is anything with a ``handle(delivery)`` method. Plain callables are
adapted with ``CallbackHook``; ``AuthenticatingHook`` wraps another hook and
only delegates deliveries whose signature matches a shared secret.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import structlog

from afterparty.errors import SignatureVerificationError
from afterparty.webhooks.delivery import Delivery
from afterparty.webhooks.security import require_signature

logger = structlog.get_logger(__name__)

DeliveryCallback = Callable[[Delivery], None]


@runtime_checkable
class Hook(Protocol):
    """Handles webhook deliveries.

    Implementations may be invoked concurrently from several requests and
    must be safe to call re-entrantly.
    """

    def handle(self, delivery: Delivery) -> None:
        """React to a delivery."""
        ...


class CallbackHook:
    """Hook that calls a plain function with each delivery."""

    def __init__(self, func: DeliveryCallback) -> None:
        self.func = func

    def handle(self, delivery: Delivery) -> None:
        self.func(delivery)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"CallbackHook({name})"


class AuthenticatingHook:
    """Hook that only delegates deliveries carrying a valid signature.

    Deliveries without a signature are ignored. Deliveries with a bad
    signature are logged and dropped; neither case is reported back to the
    sender.
    """

    def __init__(self, secret: str, hook: "Hook | DeliveryCallback") -> None:
        self.secret = secret
        self.hook = as_hook(hook)

    def authenticate(self, payload: str, signature: str) -> bool:
        """Check a signature against a raw payload.

        Args:
            payload: Unparsed delivery body.
            signature: Signature header value.

        Returns:
            True if the signature was produced with this hook's secret.
        """
        try:
            require_signature(payload, signature, self.secret)
        except SignatureVerificationError:
            return False
        return True

    def handle(self, delivery: Delivery) -> None:
        if delivery.signature is None:
            logger.debug(
                "delivery_unsigned",
                event_kind=delivery.event,
                delivery_id=delivery.id,
            )
            return

        try:
            require_signature(delivery.unparsed_payload, delivery.signature, self.secret)
        except SignatureVerificationError as e:
            logger.error(
                "delivery_authentication_failed",
                event_kind=delivery.event,
                delivery_id=delivery.id,
                **e.to_dict(),
            )
            return

        self.hook.handle(delivery)

    def __repr__(self) -> str:
        return f"AuthenticatingHook({self.hook!r})"


def as_hook(hook: "Hook | DeliveryCallback") -> Hook:
    """Coerce a hook or plain callable into a Hook.

    Args:
        hook: Object with a ``handle`` method, or a callable taking a
            delivery.

    Returns:
        The hook itself, or a ``CallbackHook`` wrapping the callable.

    Raises:
        TypeError: If ``hook`` is neither.
    """
    if isinstance(hook, Hook):
        return hook
    if callable(hook):
        return CallbackHook(hook)
    raise TypeError(f"Expected a hook or callable, got {type(hook).__name__}")
