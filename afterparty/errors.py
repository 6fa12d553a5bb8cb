"""Error types raised while receiving webhook deliveries.

Exception Hierarchy:
    AfterpartyError (base)
    ├── InvalidHeadersError - Required delivery headers missing or unreadable
    ├── BodyReadError - Request body could not be read
    ├── EventParseError - Payload could not be decoded for its event kind
    ├── SignatureVerificationError - Signature did not match the payload
    └── HookExecutionError - A registered hook raised while handling a delivery
"""

from typing import Any


class AfterpartyError(Exception):
    """Base exception for all afterparty errors.

    Attributes:
        message: Human-readable error message.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidHeadersError(AfterpartyError):
    """Required delivery headers are missing or not valid text.

    Attributes:
        header: Name of the offending header.
    """

    def __init__(
        self,
        message: str,
        *,
        header: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.header = header

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        base = super().to_dict()
        base["header"] = self.header
        return base


class BodyReadError(AfterpartyError):
    """The request body could not be read."""


class EventParseError(AfterpartyError):
    """A payload could not be decoded into its event model.

    Attributes:
        event: Event kind the payload was decoded for.
        reason: Decoder error description.
    """

    def __init__(
        self,
        message: str,
        *,
        event: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.event = event
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        base = super().to_dict()
        base.update({"event": self.event, "reason": self.reason})
        return base


class SignatureVerificationError(AfterpartyError):
    """A delivery signature did not match its payload."""


class HookExecutionError(AfterpartyError):
    """A hook raised while handling a delivery.

    Attributes:
        event: Event kind of the delivery.
        delivery_id: Identifier of the delivery.
        hook: Description of the failing hook.
    """

    def __init__(
        self,
        message: str,
        *,
        event: str,
        delivery_id: str,
        hook: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.event = event
        self.delivery_id = delivery_id
        self.hook = hook

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        base = super().to_dict()
        base.update(
            {"event": self.event, "delivery_id": self.delivery_id, "hook": self.hook}
        )
        return base
