import hashlib
import hmac
from typing import Optional

from codeguardian.exceptions import WebhookSignatureError

SIGNATURE_PREFIX = "sha256="


def compute_signature(payload: bytes, secret: str) -> str:
    """Returns the ``sha256=<hex>`` digest GitHub sends for ``payload``."""
    digest = hmac.new(secret.encode(), payload, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(payload: bytes, signature: Optional[str], secret: str) -> None:
    """Checks ``signature`` against the HMAC of the exact received bytes.

    Raises:
        WebhookSignatureError: If the signature is absent or does not match.
    """
    if not signature:
        raise WebhookSignatureError.missing()

    expected_signature = compute_signature(payload, secret)
    if not hmac.compare_digest(expected_signature.encode(), signature.encode()):
        raise WebhookSignatureError.invalid()
