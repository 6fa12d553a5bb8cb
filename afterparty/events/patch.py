"""Payload patching applied before typed decoding.

The typed models are discriminated by a top-level ``event`` key that GitHub
does not send. A few payloads carry their own free-form ``event`` key, which
would collide with the discriminator, so it is moved aside to
``event_field`` before the kind name is written in its place. If the payload
already has an ``event_field`` key, underscores are appended until the name
is free.
"""

import json

from afterparty.events.payloads import KNOWN_EVENTS

DISCRIMINATOR = "event"
DISPLACED_FIELD = "event_field"


def patch_payload_json(event: str, payload: str) -> str:
    """Return ``payload`` rewritten so it can be decoded as ``event``.

    Pure function of its arguments. Unknown event kinds, malformed JSON and
    JSON documents that are not objects are returned unchanged so the
    decoder reports the real problem.

    Args:
        event: Event kind from the delivery headers.
        payload: Raw JSON text of the delivery body.

    Returns:
        Patched JSON text.
    """
    if event not in KNOWN_EVENTS:
        return payload

    try:
        document = json.loads(payload)
    except ValueError:
        return payload

    if not isinstance(document, dict):
        return payload

    displaced = DISPLACED_FIELD
    while displaced in document:
        displaced += "_"

    patched = {DISCRIMINATOR: event}
    for key, value in document.items():
        if key == DISCRIMINATOR:
            patched[displaced] = value
        else:
            patched[key] = value

    return json.dumps(patched)
