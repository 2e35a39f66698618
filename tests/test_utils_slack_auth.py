"""
Tests for Slack request signature verification
"""
import hashlib
import hmac

import pytest

from exceptions import SignatureVerificationError
from utils.slack_auth import compute_slack_signature, verify_slack_signature

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_760_000_000
BODY = '{"type":"event_callback","event":{"type":"message","text":"hi"}}'


def sign(body: str = BODY, timestamp: int = NOW, secret: str = SECRET) -> str:
    return compute_slack_signature(secret, str(timestamp), body)


class TestComputeSlackSignature:
    """Test signature computation."""

    def test_matches_hmac_sha256_of_basestring(self):
        """Test the v0 basestring format."""
        expected = hmac.new(
            SECRET.encode(),
            f"v0:{NOW}:{BODY}".encode(),
            hashlib.sha256
        ).hexdigest()

        assert sign() == f"v0={expected}"

    def test_body_changes_signature(self):
        """Test that any body change alters the signature."""
        assert sign(BODY) != sign(BODY + " ")


class TestVerifySlackSignature:
    """Test verify_slack_signature acceptance and rejection."""

    def test_valid_signature(self):
        """Test that a correctly signed request passes."""
        verify_slack_signature(SECRET, str(NOW), sign(), BODY, now=NOW)

    def test_valid_within_window(self):
        """Test a timestamp exactly at the window edge."""
        verify_slack_signature(SECRET, str(NOW - 300), sign(timestamp=NOW - 300), BODY, now=NOW)

    def test_tampered_body(self):
        """Test that a signature for the original body fails on a changed body."""
        tampered = BODY.replace('"hi"', '"Round 1, Pick 1"')

        with pytest.raises(SignatureVerificationError, match="mismatch"):
            verify_slack_signature(SECRET, str(NOW), sign(), tampered, now=NOW)

    def test_stale_timestamp(self):
        """Test that an otherwise valid signature older than 300 seconds fails."""
        old = NOW - 301

        with pytest.raises(SignatureVerificationError, match="replay window"):
            verify_slack_signature(SECRET, str(old), sign(timestamp=old), BODY, now=NOW)

    def test_future_timestamp(self):
        """Test that timestamps too far in the future also fail."""
        future = NOW + 301

        with pytest.raises(SignatureVerificationError, match="replay window"):
            verify_slack_signature(SECRET, str(future), sign(timestamp=future), BODY, now=NOW)

    def test_custom_max_age(self):
        """Test a narrower replay window."""
        with pytest.raises(SignatureVerificationError):
            verify_slack_signature(SECRET, str(NOW - 61), sign(timestamp=NOW - 61), BODY, max_age=60, now=NOW)

    def test_wrong_secret(self):
        """Test a signature made with another secret."""
        with pytest.raises(SignatureVerificationError):
            verify_slack_signature(SECRET, str(NOW), sign(secret="other"), BODY, now=NOW)

    @pytest.mark.parametrize("timestamp,signature", [
        (None, "v0=abc"),
        (str(NOW), None),
        ("", "v0=abc"),
        (str(NOW), ""),
    ])
    def test_missing_headers(self, timestamp, signature):
        """Test that missing headers are rejected."""
        with pytest.raises(SignatureVerificationError, match="Missing"):
            verify_slack_signature(SECRET, timestamp, signature, BODY, now=NOW)

    def test_malformed_timestamp(self):
        """Test a non-integer timestamp."""
        with pytest.raises(SignatureVerificationError, match="Malformed"):
            verify_slack_signature(SECRET, "yesterday", sign(), BODY, now=NOW)

    def test_signature_length_mismatch(self):
        """Test that a short signature is rejected rather than erroring."""
        with pytest.raises(SignatureVerificationError):
            verify_slack_signature(SECRET, str(NOW), "v0=deadbeef", BODY, now=NOW)

    def test_unconfigured_secret(self):
        """Test that an empty signing secret never verifies."""
        with pytest.raises(SignatureVerificationError, match="not configured"):
            verify_slack_signature("", str(NOW), sign(), BODY, now=NOW)
