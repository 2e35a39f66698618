"""
Store client layer for the Slack draft webhook

HTTP client for communicating with the Firebase database.
"""
from .client import StoreClient

__all__ = ['StoreClient']
