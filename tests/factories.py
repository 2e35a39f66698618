"""
Test Factories for the Slack draft webhook

Provides factory functions to create players, store collections and Slack
requests with sensible defaults.
"""
import json
from typing import Optional, Dict, Any, List

from models.draft_pick import DraftPickEvent
from models.player import Player
from utils.slack_auth import compute_slack_signature

SIGNING_SECRET = "test-signing-secret"
STORE_URL = "https://store.example.com"
NOW = 1_760_000_000

DRAFT_TEXT = "Round 3, Pick 12 (#56 overall): Denver Blucifers select P Bill Muncey"


class PlayerFactory:
    """Factory for creating store player records."""

    @staticmethod
    def data(name: str = "Test Player", id: Optional[str] = "t001", **kwargs) -> Dict[str, Any]:
        """Create a raw store record with a few opaque stat fields."""
        record = {"Name": name, "ID": id, "Team": "FA", "WAR": 1.2}
        record.update(kwargs)
        return record

    @staticmethod
    def create(name: str = "Test Player", id: Optional[str] = "t001", **kwargs) -> Player:
        return Player.from_api_data(PlayerFactory.data(name, id, **kwargs))

    @staticmethod
    def bill_muncey(id: str = "p123") -> Dict[str, Any]:
        return PlayerFactory.data("Bill Muncey", id, Team="DEN", ERA=3.41)


def batters_collection() -> List[Any]:
    return [
        PlayerFactory.data("Mike Trout", "b001"),
        None,
        PlayerFactory.data("Ronald Acuna Jr.", "b002"),
    ]


def pitchers_collection() -> List[Any]:
    return [
        PlayerFactory.data("Gerrit Cole", "p001"),
        PlayerFactory.bill_muncey(),
    ]


def draft_pick(**overrides) -> DraftPickEvent:
    defaults = {
        "round": 3,
        "pick": 12,
        "overall": 56,
        "team_name": "Denver Blucifers",
        "position": "P",
        "player_name": "Bill Muncey",
    }
    defaults.update(overrides)
    return DraftPickEvent(**defaults)


def message_payload(text: str = DRAFT_TEXT, **event_overrides) -> Dict[str, Any]:
    """Create an event_callback payload for a channel message."""
    event = {
        "type": "message",
        "text": text,
        "user": "U123",
        "channel": "C456",
        "ts": "1760000000.000100",
    }
    event.update(event_overrides)
    return {
        "type": "event_callback",
        "team_id": "T789",
        "event_id": "Ev001",
        "event": event,
    }


def signed_headers(body: str, timestamp: int = NOW, secret: str = SIGNING_SECRET) -> Dict[str, str]:
    """Headers Slack would attach to a request body."""
    return {
        "Content-Type": "application/json",
        "X-Slack-Request-Timestamp": str(timestamp),
        "X-Slack-Signature": compute_slack_signature(secret, str(timestamp), body),
    }


def dumps(payload: Dict[str, Any]) -> str:
    return json.dumps(payload)
