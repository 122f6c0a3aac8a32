"""GitHub webhook signature validation."""

import hashlib
import hmac
import logging

from webhook_dispatcher.exceptions import MissingSignatureError, SignatureFormatError

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="


def sign_payload(payload: bytes, secret: str) -> str:
    """Compute the X-Hub-Signature-256 value for a payload."""
    return (
        SIGNATURE_PREFIX
        + hmac.new(
            secret.encode("utf-8"),
            payload,
            hashlib.sha256,
        ).hexdigest()
    )


def verify_signature(payload: bytes, signature: str | None, secret: str | None) -> bool:
    """
    Validate a GitHub webhook signature using HMAC SHA-256.

    The digest is computed over the raw body exactly as received.

    Args:
        payload: The raw request body bytes
        signature: The X-Hub-Signature-256 header value
        secret: The shared webhook secret; None or empty skips verification

    Returns:
        True if the signature is valid or verification is disabled, False otherwise

    Raises:
        MissingSignatureError: If a secret is configured and no signature was sent
        SignatureFormatError: If the signature does not start with sha256=
    """
    if not secret:
        return True

    if not signature:
        logger.warning("Missing webhook signature")
        raise MissingSignatureError("X-Hub-Signature-256 header missing")

    if not signature.startswith(SIGNATURE_PREFIX):
        logger.warning("Invalid signature format - expected sha256= prefix")
        raise SignatureFormatError("Signature must start with sha256=")

    expected = sign_payload(payload, secret).encode("utf-8")
    received = signature.encode("utf-8")

    is_valid = len(expected) == len(received) and hmac.compare_digest(expected, received)

    if not is_valid:
        logger.warning("Webhook signature validation failed")

    return is_valid
