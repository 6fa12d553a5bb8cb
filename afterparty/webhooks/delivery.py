"""The Delivery value handed to hooks."""

from dataclasses import dataclass

from afterparty.events import EventPayload, parse_event


@dataclass(frozen=True)
class Delivery:
    """One inbound webhook notification.

    Attributes:
        id: Delivery identifier from the ``X-GitHub-Delivery`` header.
        event: Event kind from the ``X-GitHub-Event`` header.
        payload: Payload decoded from the (patched) body.
        unparsed_payload: Body text exactly as received. Signatures are
            verified against this, never against ``payload``.
        signature: Raw ``X-Hub-Signature`` header value, if any.
    """

    id: str
    event: str
    payload: EventPayload
    unparsed_payload: str
    signature: str | None = None

    @classmethod
    def parse(
        cls,
        id: str,
        event: str,
        payload: str,
        signature: str | None = None,
    ) -> "Delivery":
        """Build a delivery by decoding its raw body.

        Args:
            id: Delivery identifier.
            event: Event kind.
            payload: Raw body text.
            signature: Optional signature header value.

        Returns:
            Delivery with a decoded payload.

        Raises:
            EventParseError: If the body cannot be decoded for ``event``.
        """
        return cls(
            id=id,
            event=event,
            payload=parse_event(event, payload),
            unparsed_payload=payload,
            signature=signature,
        )
