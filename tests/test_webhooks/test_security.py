"""Tests for webhook security module."""

import hashlib
import hmac

import pytest

from afterparty.errors import SignatureVerificationError
from afterparty.webhooks.security import (
    SIGNATURE_PREFIX,
    generate_signature,
    require_signature,
    verify_signature,
)

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def sample_payload():
    """Sample ping body."""
    return '{"zen": "Approachable is better than simple."}'


@pytest.fixture
def sample_secret():
    """Sample webhook secret."""
    return "secret"


# ============================================================================
# generate_signature Tests
# ============================================================================


class TestGenerateSignature:
    """Tests for generate_signature function."""

    def test_matches_hmac_sha1(self, sample_payload, sample_secret):
        """Test that the signature is the prefixed HMAC-SHA1 hex digest."""
        expected = hmac.new(
            sample_secret.encode(), sample_payload.encode(), hashlib.sha1
        ).hexdigest()

        assert generate_signature(sample_payload, sample_secret) == f"sha1={expected}"

    def test_format(self, sample_payload, sample_secret):
        """Test signature prefix and digest length."""
        signature = generate_signature(sample_payload, sample_secret)

        assert signature.startswith(SIGNATURE_PREFIX)
        assert len(signature) == len(SIGNATURE_PREFIX) + 40  # SHA1 hex is 40 chars

    def test_different_secrets(self, sample_payload):
        """Test that different secrets produce different signatures."""
        assert generate_signature(sample_payload, "a") != generate_signature(sample_payload, "b")


# ============================================================================
# verify_signature Tests
# ============================================================================


class TestVerifySignature:
    """Tests for verify_signature and require_signature."""

    def test_verify_valid_signature(self, sample_payload, sample_secret):
        """Test verifying a valid signature."""
        signature = generate_signature(sample_payload, sample_secret)

        assert verify_signature(sample_payload, signature, sample_secret) is True

    def test_single_changed_character_fails(self, sample_payload, sample_secret):
        """Test that altering any digest character fails verification."""
        signature = generate_signature(sample_payload, sample_secret)
        prefix_len = len(SIGNATURE_PREFIX)

        for index in range(prefix_len, len(signature)):
            replacement = "0" if signature[index] != "0" else "1"
            tampered = signature[:index] + replacement + signature[index + 1:]
            assert verify_signature(sample_payload, tampered, sample_secret) is False

    def test_wrong_secret(self, sample_payload, sample_secret):
        """Test rejecting a signature made with another secret."""
        signature = generate_signature(sample_payload, "other")

        assert verify_signature(sample_payload, signature, sample_secret) is False

    def test_modified_payload(self, sample_payload, sample_secret):
        """Test rejecting a signature for a modified payload."""
        signature = generate_signature(sample_payload, sample_secret)

        assert verify_signature(sample_payload + " ", signature, sample_secret) is False

    def test_missing_prefix(self, sample_payload, sample_secret):
        """Test rejecting a digest without the sha1= prefix."""
        digest = generate_signature(sample_payload, sample_secret)[len(SIGNATURE_PREFIX):]

        with pytest.raises(SignatureVerificationError, match="prefix"):
            require_signature(sample_payload, digest, sample_secret)

    def test_sha256_prefix_rejected(self, sample_payload, sample_secret):
        """Test that other algorithms are not accepted."""
        digest = generate_signature(sample_payload, sample_secret)[len(SIGNATURE_PREFIX):]

        assert verify_signature(sample_payload, f"sha256={digest}", sample_secret) is False

    def test_malformed_hex(self, sample_payload, sample_secret):
        """Test that non-hex digests fail verification."""
        with pytest.raises(SignatureVerificationError, match="hex"):
            require_signature(sample_payload, "sha1=zz-not-hex", sample_secret)

        assert verify_signature(sample_payload, "sha1=abc", sample_secret) is False

    @pytest.mark.parametrize("separator", [" ", "\t", "\n"])
    def test_whitespace_in_digest_rejected(self, sample_payload, sample_secret, separator):
        """Test that a correct digest split by whitespace is not valid hex."""
        digest = generate_signature(sample_payload, sample_secret)[len(SIGNATURE_PREFIX):]
        signature = SIGNATURE_PREFIX + digest[:2] + separator + digest[2:]

        with pytest.raises(SignatureVerificationError, match="hex") as exc_info:
            require_signature(sample_payload, signature, sample_secret)

        assert exc_info.value.details["reason"] == "hex"

    def test_truncated_digest(self, sample_payload, sample_secret):
        """Test that a valid-hex but short digest fails."""
        signature = generate_signature(sample_payload, sample_secret)[:-2]

        with pytest.raises(SignatureVerificationError, match="does not match"):
            require_signature(sample_payload, signature, sample_secret)
