"""
Draft utility functions for the Slack draft webhook

Parses draft pick announcements posted by the draft bot, e.g.
"Round 3, Pick 12 (#56 overall): Denver Blucifers select P Bill Muncey"
"""
import re
from typing import Optional

from pydantic import ValidationError

from models.draft_pick import DraftPickEvent
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)

# Keywords match in any case; digits are ASCII only.
DRAFT_MESSAGE_PATTERN = re.compile(
    r'Round (\d+), Pick (\d+) \(#(\d+) overall\): (.+?) select ([A-Z]+(?:/[A-Z]+)?) (.+)',
    re.IGNORECASE | re.ASCII
)


def parse_draft_message(text: Optional[str]) -> Optional[DraftPickEvent]:
    """
    Extract a draft pick from an announcement message.

    The team name runs up to the first " select "; the position is one or two
    slash-separated letter groups (P, SP/RP); the player name is the rest of
    the line. Captured fields are trimmed but keep their inner whitespace.

    Args:
        text: Raw Slack message text

    Returns:
        DraftPickEvent with every field populated, or None when the text is not
        a draft announcement

    Examples:
        >>> parse_draft_message("Round 3, Pick 12 (#56 overall): Denver Blucifers select P Bill Muncey")
        DraftPickEvent(round=3, pick=12, overall=56, team_name=Denver Blucifers, position=P, player_name=Bill Muncey)

        >>> parse_draft_message("Congrats to everyone on a great draft!") is None
        True
    """
    if not text:
        return None

    match = DRAFT_MESSAGE_PATTERN.search(text)
    if not match:
        return None

    round_str, pick_str, overall_str, team_name, position, player_name = match.groups()

    try:
        return DraftPickEvent(
            round=int(round_str),
            pick=int(pick_str),
            overall=int(overall_str),
            team_name=team_name.strip(),
            position=position.strip(),
            player_name=player_name.strip()
        )
    except ValidationError as e:
        # Zero round/pick or a field that was only whitespace
        logger.debug(f"Draft message matched but failed validation: {e}")
        return None
