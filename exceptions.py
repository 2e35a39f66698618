"""
Custom exceptions for the Slack draft webhook

The webhook handler maps these onto HTTP status codes; services raise them
and never retry.
"""


class WebhookException(Exception):
    """Base exception for all webhook-related errors."""
    pass


class APIException(WebhookException):
    """Exception for store API errors (HTTP failures, network issues)."""
    pass


class SignatureVerificationError(WebhookException):
    """Raised when a Slack request signature is missing, invalid or stale."""
    pass


class InvalidPayloadError(WebhookException):
    """Raised when a request body is not a JSON object."""
    pass


class PlayerNotFoundError(WebhookException):
    """Raised when a requested player cannot be found."""
    pass


class ConfigurationException(WebhookException):
    """Exception for configuration-related errors."""
    pass
