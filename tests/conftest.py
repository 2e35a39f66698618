"""
Pytest configuration and fixtures for the Slack draft webhook tests.

This file provides test isolation and shared fixtures.
"""
import os
import pytest

# Ensure required settings exist before any module builds a config
os.environ.setdefault("SLACK_SIGNING_SECRET", "test-signing-secret")
os.environ.setdefault("FIREBASE_URL", "https://store.example.com")


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset global state between tests.

    This prevents test pollution from the config singleton and logging context.
    """
    yield

    import config as cfg
    cfg._config = None

    from utils.logging import clear_context
    clear_context()
