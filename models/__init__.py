"""
Data models for the Slack draft webhook

Clean Pydantic models with proper validation and type safety.
"""

from models.base import DraftBaseModel
from models.player import Player, PlayerType, PlayerMatch
from models.draft_pick import DraftPickEvent
from models.drafted_mark import DraftedMark
from models.slack import SlackEvent, SlackPayload

__all__ = [
    'DraftBaseModel',
    'Player',
    'PlayerType',
    'PlayerMatch',
    'DraftPickEvent',
    'DraftedMark',
    'SlackEvent',
    'SlackPayload',
]
