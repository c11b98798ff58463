"""HMAC-SHA256 signing and verification of webhook deliveries.

Deliveries carry the signature in a request header:
  X-TransVoucher-Signature: sha256=<hex_digest>

The digest is computed over the raw request body exactly as received,
never over a re-serialized JSON document.

Usage:
    # Signing (tests, replay tooling)
    headers = sign_headers(body_bytes, secret)

    # Verification (inbound)
    signature = extract_signature(request.headers["X-TransVoucher-Signature"])
    is_valid = verify_signature(body_bytes, signature, secret)
"""

import hashlib
import hmac
import logging
import re
from typing import Union

from transvoucher.core.errors import MalformedSignatureHeader

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-TransVoucher-Signature"
SIGNATURE_PREFIX = "sha256="
HEX_DIGEST_RE = re.compile(r"[0-9a-fA-F]+")

Payload = Union[bytes, bytearray, str]
Secret = Union[bytes, str]


def _to_bytes(value, what: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"{what} must be bytes or str, not {type(value).__name__}")


def generate_signature(payload: Payload, secret: Secret) -> str:
    """Return the canonical ``sha256=<hex>`` signature of ``payload``."""
    digest = hmac.new(
        _to_bytes(secret, "secret"),
        _to_bytes(payload, "payload"),
        hashlib.sha256,
    ).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def secure_compare(a: str, b: str) -> bool:
    """
    Compare two signatures without leaking where they differ.

    Lengths are public here, so unequal lengths return immediately.
    """
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def verify_signature(payload: Payload, signature: str, secret: Secret) -> bool:
    """
    Check ``signature`` against the payload. Never raises: any failure
    while computing or comparing counts as a mismatch.
    """
    try:
        expected = generate_signature(payload, secret)
        return secure_compare(signature, expected)
    except Exception:
        logger.debug("Signature computation failed", exc_info=True)
        return False


def extract_signature(header: str) -> str:
    """
    Normalize a signature header to ``sha256=<hex>``.

    Accepts the canonical form as-is, or a ``t=<ts>,v1=<hex>`` list whose
    ``v1`` component becomes the digest.
    """
    if not header:
        raise MalformedSignatureHeader("Signature header is required")

    if header.startswith(SIGNATURE_PREFIX):
        if HEX_DIGEST_RE.fullmatch(header[len(SIGNATURE_PREFIX):]):
            return header
        raise MalformedSignatureHeader("Invalid signature header format")

    for part in header.split(","):
        key, sep, value = part.strip().partition("=")
        if sep and key == "v1" and HEX_DIGEST_RE.fullmatch(value):
            return f"{SIGNATURE_PREFIX}{value}"

    raise MalformedSignatureHeader("Invalid signature header format")


def sign_headers(payload: Payload, secret: Secret) -> dict[str, str]:
    """Headers a sender attaches to a signed delivery."""
    return {
        SIGNATURE_HEADER: generate_signature(payload, secret),
        "Content-Type": "application/json",
    }
