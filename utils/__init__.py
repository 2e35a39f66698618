"""
Utility helpers for the Slack draft webhook
"""
