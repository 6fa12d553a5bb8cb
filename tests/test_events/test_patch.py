"""Tests for payload patching."""

import json

import pytest

from afterparty.events.patch import DISPLACED_FIELD, patch_payload_json
from afterparty.events.payloads import KNOWN_EVENTS

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def star_payload():
    """Minimal star payload text."""
    return '{"action": "created", "starred_at": "2024-01-01T00:00:00Z"}'


# ============================================================================
# patch_payload_json Tests
# ============================================================================


class TestPatchPayloadJson:
    """Tests for patch_payload_json function."""

    def test_known_event_gets_discriminator(self, star_payload):
        """Test that the kind name is written into the payload."""
        patched = json.loads(patch_payload_json("star", star_payload))

        assert patched["event"] == "star"
        assert patched["action"] == "created"

    def test_colliding_field_is_preserved(self):
        """Test that an existing event key is moved aside, not lost."""
        payload = '{"event": "labeled", "action": "created"}'

        patched = json.loads(patch_payload_json("issues", payload))

        assert patched["event"] == "issues"
        assert patched[DISPLACED_FIELD] == "labeled"
        assert patched["action"] == "created"

    @pytest.mark.parametrize(
        "payload",
        [
            '{"event": "labeled", "event_field": "kept"}',
            '{"event_field": "kept", "event": "labeled"}',
        ],
    )
    def test_existing_event_field_not_overwritten(self, payload):
        """Test that a payload's own event_field survives the move."""
        patched = json.loads(patch_payload_json("issues", payload))

        assert patched["event"] == "issues"
        assert patched[DISPLACED_FIELD] == "kept"
        assert patched[DISPLACED_FIELD + "_"] == "labeled"

    def test_unknown_event_unchanged(self):
        """Test that unknown kinds are passed through byte for byte."""
        payload = '{"event":  "x", "zen": 1}'

        assert patch_payload_json("deployment_protection_rule", payload) == payload

    def test_malformed_json_unchanged(self):
        """Test that malformed JSON is left for the decoder to reject."""
        payload = '{"zen": '

        assert patch_payload_json("ping", payload) == payload

    def test_non_object_unchanged(self):
        """Test that JSON arrays are not patched."""
        payload = "[1, 2, 3]"

        assert patch_payload_json("push", payload) == payload

    def test_pure(self, star_payload):
        """Test that patching is deterministic and leaves input alone."""
        original = str(star_payload)

        first = patch_payload_json("star", star_payload)
        second = patch_payload_json("star", star_payload)

        assert first == second
        assert star_payload == original

    @pytest.mark.parametrize("event", sorted(KNOWN_EVENTS))
    def test_every_known_event_patched(self, event):
        """Test that every known kind receives its own discriminator."""
        patched = json.loads(patch_payload_json(event, "{}"))

        assert patched == {"event": event}
