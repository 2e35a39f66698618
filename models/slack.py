"""
Slack Events API payload models

Typed view over the JSON Slack posts to the webhook. Unknown fields are ignored.
"""
from typing import Optional

from constants import URL_VERIFICATION, EVENT_CALLBACK
from models.base import DraftBaseModel


class SlackEvent(DraftBaseModel):
    """Inner event of an event_callback payload."""

    type: Optional[str] = None
    subtype: Optional[str] = None
    bot_id: Optional[str] = None
    text: Optional[str] = None
    user: Optional[str] = None
    channel: Optional[str] = None
    ts: Optional[str] = None


class SlackPayload(DraftBaseModel):
    """Top-level Events API request body."""

    type: Optional[str] = None
    challenge: Optional[str] = None
    team_id: Optional[str] = None
    event_id: Optional[str] = None
    event: Optional[SlackEvent] = None

    @property
    def is_url_verification(self) -> bool:
        return self.type == URL_VERIFICATION

    @property
    def is_event_callback(self) -> bool:
        return self.type == EVENT_CALLBACK
