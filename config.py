"""
Configuration management for the Slack draft webhook
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class WebhookConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Slack settings
    slack_signing_secret: str
    signature_max_age: int = 300  # Seconds a request timestamp stays valid

    # Store settings
    firebase_url: str
    draft_data_path: str = "draftData"
    store_timeout: int = 30

    # Server settings
    webhook_path: str = "/slack/events"
    host: str = "0.0.0.0"
    port: int = 8080

    # Application settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> WebhookConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = WebhookConfig()  # type: ignore
    return _config
