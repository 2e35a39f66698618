"""
Draft sync service for the Slack draft webhook

Turns a Slack message into a drafted mark: parse, resolve team, find player, write.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.draft_pick import DraftPickEvent
from models.drafted_mark import DraftedMark
from models.player import Player
from services.player_service import PlayerService
from services.team_service import TeamService, team_service as default_team_service
from utils.draft_helpers import parse_draft_message

logger = logging.getLogger(f'{__name__}.DraftSyncService')


class SyncStatus(str, Enum):
    """Outcome of processing one message. Everything but DRAFTED is a benign no-op."""
    NOT_DRAFT_MESSAGE = "Not a draft message"
    UNKNOWN_TEAM = "Unknown team"
    PLAYER_NOT_FOUND = "Player not found"
    DRAFTED = "Player drafted successfully"


@dataclass
class SyncResult:
    """Represents the result of syncing a message to the store."""
    status: SyncStatus
    pick: Optional[DraftPickEvent] = None
    team_abbrev: Optional[str] = None
    player: Optional[Player] = None
    mark: Optional[DraftedMark] = None

    @property
    def drafted(self) -> bool:
        return self.status == SyncStatus.DRAFTED


class DraftSyncService:
    """
    Service that applies draft announcements to the store.

    Store failures raise APIException; every other miss is reported through
    SyncResult so callers can acknowledge without retrying.
    """

    def __init__(self, player_service: PlayerService, team_service: Optional[TeamService] = None):
        """
        Initialize draft sync service.

        Args:
            player_service: Store-backed player lookups and writes
            team_service: Team name resolver (defaults to the league table)
        """
        self.player_service = player_service
        self.team_service = team_service or default_team_service
        logger.debug("DraftSyncService initialized")

    async def process_message(self, text: Optional[str]) -> SyncResult:
        """
        Apply a Slack message to the store if it announces a draft pick.

        Args:
            text: Raw message text

        Returns:
            SyncResult describing what happened

        Raises:
            APIException: If reading players or writing the drafted mark fails
        """
        pick = parse_draft_message(text)
        if pick is None:
            logger.debug("Message is not a draft announcement")
            return SyncResult(SyncStatus.NOT_DRAFT_MESSAGE)

        logger.info(f"Parsed draft pick: {pick} (#{pick.overall} overall)")

        team_abbrev = self.team_service.get_abbrev(pick.team_name)
        if team_abbrev is None:
            logger.info(f"Unknown team: {pick.team_name}")
            return SyncResult(SyncStatus.UNKNOWN_TEAM, pick=pick)

        aliases = self.team_service.team_names_for(team_abbrev)
        if len(aliases) > 1:
            logger.debug(f"{team_abbrev} is shared by: {', '.join(aliases)}")

        match = await self.player_service.find_player_by_name(pick.player_name)
        if match is None or not match.player.has_id:
            logger.info(f"Player not found: {pick.player_name}")
            return SyncResult(SyncStatus.PLAYER_NOT_FOUND, pick=pick, team_abbrev=team_abbrev)

        mark = await self.player_service.mark_drafted(match, pick, team_abbrev)
        return SyncResult(
            SyncStatus.DRAFTED,
            pick=pick,
            team_abbrev=team_abbrev,
            player=match.player,
            mark=mark
        )
