"""Tests for Delivery construction and error serialization."""

import dataclasses
import json

import pytest

from afterparty.errors import EventParseError, HookExecutionError, InvalidHeadersError
from afterparty.events import IssuesEvent, OpaqueEvent
from afterparty.webhooks.delivery import Delivery

ISSUES = json.dumps(
    {
        "event": "labeled",
        "action": "opened",
        "issue": {"id": 73464126, "number": 2, "title": "Spelling error in the README file"},
    }
)


class TestDeliveryParse:
    """Tests for Delivery.parse."""

    def test_parse_known_event(self):
        """Test parsing keeps the unpatched body next to the typed payload."""
        delivery = Delivery.parse("d-1", "issues", ISSUES, "sha1=abc")

        assert isinstance(delivery.payload, IssuesEvent)
        assert delivery.payload.issue.number == 2
        assert delivery.unparsed_payload == ISSUES
        assert json.loads(delivery.unparsed_payload)["event"] == "labeled"
        assert delivery.signature == "sha1=abc"

    def test_parse_unknown_event(self):
        """Test parsing an unknown kind."""
        delivery = Delivery.parse("d-2", "sponsorship", '{"action": "created"}')

        assert isinstance(delivery.payload, OpaqueEvent)
        assert delivery.signature is None

    def test_parse_failure(self):
        """Test that undecodable bodies never produce a delivery."""
        with pytest.raises(EventParseError):
            Delivery.parse("d-3", "issues", '{"action": "opened"}')

    def test_immutable(self):
        """Test that deliveries are frozen."""
        delivery = Delivery.parse("d-4", "sponsorship", "{}")

        with pytest.raises(dataclasses.FrozenInstanceError):
            delivery.id = "other"


class TestErrors:
    """Tests for error serialization."""

    def test_invalid_headers_to_dict(self):
        """Test header error details."""
        error = InvalidHeadersError("Missing X-GitHub-Event header", header="X-GitHub-Event")

        data = error.to_dict()

        assert data["error_type"] == "InvalidHeadersError"
        assert data["header"] == "X-GitHub-Event"
        assert data["details"] == {}

    def test_hook_execution_to_dict(self):
        """Test hook failure details."""
        error = HookExecutionError("failed", event="push", delivery_id="d", hook="CallbackHook(f)")

        data = error.to_dict()

        assert data["event"] == "push"
        assert data["delivery_id"] == "d"
        assert data["hook"] == "CallbackHook(f)"
        assert str(error) == "failed"
