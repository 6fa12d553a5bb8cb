"""Hook registration and lookup.

A Hub maps event kinds to the ordered hooks interested in them. Hooks
registered under ``"*"`` receive every event kind, after the hooks
registered for that kind explicitly.
"""

import threading
from collections.abc import Callable
from types import MappingProxyType
from typing import TypeVar

import structlog

from afterparty.webhooks.delivery import Delivery
from afterparty.webhooks.hooks import (
    AuthenticatingHook,
    DeliveryCallback,
    Hook,
    as_hook,
)

logger = structlog.get_logger(__name__)

WILDCARD = "*"

H = TypeVar("H", bound=Callable[[Delivery], None])


class Hub:
    """Registry of hooks keyed by event kind.

    Registration is expected to happen before the hub serves traffic, but it
    stays safe afterwards: writers serialize on a lock and publish a fresh
    mapping, so readers always see a complete snapshot without locking.

    Example:
        hub = Hub()
        hub.register("push", on_push)
        hub.handle_authenticated("*", "s3cret", audit)

        @hub.on("issues")
        def on_issue(delivery):
            ...
    """

    def __init__(self) -> None:
        """Initialize an empty hub."""
        self._hooks: MappingProxyType[str, tuple[Hook, ...]] = MappingProxyType({})
        self._lock = threading.Lock()
        self._logger = logger.bind(component="hub")

    def register(self, event: str, hook: Hook | DeliveryCallback) -> None:
        """Append a hook to the hooks interested in an event kind.

        The same hook may be registered more than once and will then run
        once per registration.

        Args:
            event: Event kind, or ``"*"`` for every kind.
            hook: Hook or plain callable taking a delivery.
        """
        resolved = as_hook(hook)
        with self._lock:
            hooks = dict(self._hooks)
            hooks[event] = hooks.get(event, ()) + (resolved,)
            self._hooks = MappingProxyType(hooks)

        self._logger.debug(
            "hook_registered",
            event_kind=event,
            hook=repr(resolved),
            hook_count=len(hooks[event]),
        )

    # Alias of ``register``.
    handle = register

    def handle_authenticated(
        self,
        event: str,
        secret: str,
        hook: Hook | DeliveryCallback,
    ) -> None:
        """Register a hook that only runs for correctly signed deliveries.

        Args:
            event: Event kind, or ``"*"`` for every kind.
            secret: Shared secret the sender signs payloads with.
            hook: Hook or plain callable taking a delivery.
        """
        self.register(event, AuthenticatingHook(secret, hook))

    def on(self, event: str, *, secret: str | None = None) -> Callable[[H], H]:
        """Decorator form of ``register``.

        Args:
            event: Event kind, or ``"*"`` for every kind.
            secret: If given, the function is registered authenticated.

        Example:
            @hub.on("push", secret="s3cret")
            def deploy(delivery):
                ...
        """

        def decorator(func: H) -> H:
            if secret is None:
                self.register(event, func)
            else:
                self.handle_authenticated(event, secret, func)
            return func

        return decorator

    def resolve(self, event: str) -> list[Hook] | None:
        """Get all hooks interested in an event kind.

        Args:
            event: Event kind of a delivery.

        Returns:
            Hooks registered for ``event`` followed by wildcard hooks, each
            group in registration order, or None if neither group exists.
        """
        hooks = self._hooks
        explicit = hooks.get(event)
        wildcard = hooks.get(WILDCARD) if event != WILDCARD else None

        if explicit is None and wildcard is None:
            return None

        return [*(explicit or ()), *(wildcard or ())]

    def events(self) -> list[str]:
        """Registered event kinds in first-registration order."""
        return list(self._hooks)

    def size(self) -> int:
        """Number of distinct registered event kinds (not hooks)."""
        return len(self._hooks)

    def __len__(self) -> int:
        return self.size()
