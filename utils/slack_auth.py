"""
Slack request signing utilities

Implements Slack's v0 signing scheme: an HMAC-SHA256 over
"v0:<timestamp>:<raw body>" keyed with the app's signing secret.
"""
import hashlib
import hmac
import logging
import time
from typing import Optional

from constants import SLACK_SIGNATURE_VERSION
from exceptions import SignatureVerificationError

logger = logging.getLogger(f'{__name__}.SlackAuth')


def compute_slack_signature(signing_secret: str, timestamp: str, body: str) -> str:
    """
    Compute the signature Slack would send for a request.

    Args:
        signing_secret: Shared Slack signing secret
        timestamp: X-Slack-Request-Timestamp header value
        body: Raw request body

    Returns:
        Signature in header form, e.g. "v0=3f9a..."
    """
    basestring = f"{SLACK_SIGNATURE_VERSION}:{timestamp}:{body}"
    digest = hmac.new(
        signing_secret.encode('utf-8'),
        basestring.encode('utf-8'),
        hashlib.sha256
    ).hexdigest()
    return f"{SLACK_SIGNATURE_VERSION}={digest}"


def verify_slack_signature(
    signing_secret: str,
    timestamp: Optional[str],
    signature: Optional[str],
    body: str,
    max_age: int = 300,
    now: Optional[float] = None
) -> None:
    """
    Verify a Slack request signature.

    Args:
        signing_secret: Shared Slack signing secret
        timestamp: X-Slack-Request-Timestamp header value
        signature: X-Slack-Signature header value
        body: Raw request body exactly as received
        max_age: Maximum allowed clock distance in seconds (replay window)
        now: Current epoch seconds override (defaults to time.time())

    Raises:
        SignatureVerificationError: If a header is missing, the timestamp is
            malformed or outside the replay window, or the signature differs
    """
    if not signing_secret:
        raise SignatureVerificationError("Signing secret is not configured")

    if not signature or not timestamp:
        raise SignatureVerificationError("Missing signature or timestamp header")

    try:
        request_time = int(timestamp)
    except ValueError:
        raise SignatureVerificationError(f"Malformed timestamp: {timestamp!r}")

    current_time = int(now if now is not None else time.time())
    if abs(current_time - request_time) > max_age:
        raise SignatureVerificationError(
            f"Timestamp outside replay window ({current_time - request_time}s)"
        )

    expected = compute_slack_signature(signing_secret, timestamp, body)
    if not hmac.compare_digest(expected.encode('utf-8'), signature.encode('utf-8')):
        raise SignatureVerificationError("Signature mismatch")

    logger.debug("Slack signature verified")
