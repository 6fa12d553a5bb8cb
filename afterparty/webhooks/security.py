"""Webhook security utilities.

Provides HMAC-SHA1 signature generation and verification following GitHub's
``X-Hub-Signature`` convention: ``sha1=<hex digest>`` computed over the raw
request body with the shared secret as key.
"""

import hashlib
import hmac
import string

import structlog

from afterparty.errors import SignatureVerificationError

logger = structlog.get_logger(__name__)

SIGNATURE_PREFIX = "sha1="

_HEX_DIGITS = frozenset(string.hexdigits)


def _digest(payload: str, secret: str) -> bytes:
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha1,
    ).digest()


def generate_signature(payload: str, secret: str) -> str:
    """Generate the signature header value for a payload.

    Args:
        payload: Raw request body.
        secret: Shared webhook secret.

    Returns:
        Signature in ``sha1=<hex>`` form.
    """
    return SIGNATURE_PREFIX + _digest(payload, secret).hex()


def require_signature(payload: str, signature: str, secret: str) -> None:
    """Check a signature header value against a payload.

    Args:
        payload: Raw request body, exactly as received.
        signature: Claimed signature in ``sha1=<hex>`` form.
        secret: Shared webhook secret.

    Raises:
        SignatureVerificationError: If the prefix is missing, the digest is
            not valid hex, or the digest does not match.
    """
    if not signature.startswith(SIGNATURE_PREFIX):
        raise SignatureVerificationError(
            f"Signature is missing the '{SIGNATURE_PREFIX}' prefix",
            details={"reason": "prefix"},
        )

    digest = signature[len(SIGNATURE_PREFIX):]
    if not _HEX_DIGITS.issuperset(digest) or len(digest) % 2:
        raise SignatureVerificationError(
            "Signature digest is not valid hex",
            details={"reason": "hex"},
        )
    claimed = bytes.fromhex(digest)

    # Use constant-time comparison to prevent timing attacks
    if not hmac.compare_digest(_digest(payload, secret), claimed):
        raise SignatureVerificationError(
            "Signature does not match payload",
            details={"reason": "mismatch"},
        )


def verify_signature(payload: str, signature: str, secret: str) -> bool:
    """Verify a signature header value against a payload.

    Args:
        payload: Raw request body, exactly as received.
        signature: Claimed signature in ``sha1=<hex>`` form.
        secret: Shared webhook secret.

    Returns:
        True if signature is valid, False otherwise.
    """
    try:
        require_signature(payload, signature, secret)
    except SignatureVerificationError as e:
        logger.debug("webhook_signature_invalid", reason=e.details.get("reason"))
        return False

    logger.debug("webhook_signature_verified", payload_length=len(payload))
    return True
