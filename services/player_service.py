"""
Player service for the Slack draft webhook

Finds players by name across the batters and pitchers collections and writes
drafted marks back to the store.
"""
import logging
from datetime import datetime, timezone
from typing import Optional, List

from api.client import StoreClient
from services.base_service import BaseService
from models.player import Player, PlayerType, PlayerMatch
from models.draft_pick import DraftPickEvent
from models.drafted_mark import DraftedMark
from exceptions import APIException, PlayerNotFoundError
from utils.text_utils import normalize_name

logger = logging.getLogger(f'{__name__}.PlayerService')

DRAFTED_PLAYERS_PATH = 'draftedPlayerIds'
LAST_UPDATED_PATH = 'lastUpdated'


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2026-03-01T18:04:05.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class PlayerService(BaseService[Player]):
    """
    Service for player-related operations.

    Features:
    - Collection retrieval for batters and pitchers
    - Name lookup on normalized names, batters before pitchers
    - Drafted mark writes keyed by player ID
    - Last-updated marker for downstream cache invalidation
    """

    def __init__(self, client: StoreClient, root_path: str = 'draftData'):
        """Initialize player service."""
        super().__init__(Player, client, root_path)
        logger.debug("PlayerService initialized")

    async def get_players(self, player_type: PlayerType) -> List[Player]:
        """
        Get every player in a collection.

        Args:
            player_type: Collection to read

        Returns:
            Players in stored order (empty if the store has no content)

        Raises:
            APIException: For store errors
        """
        return await self.get_collection(PlayerType(player_type).value)

    async def find_player_by_name(self, name: str) -> Optional[PlayerMatch]:
        """
        Find a player by normalized name.

        Batters are scanned before pitchers, each in stored order, and the first
        match wins. Duplicate names therefore resolve to the earliest entry.

        Args:
            name: Player name as announced

        Returns:
            PlayerMatch, or None if no player has that name

        Raises:
            APIException: For store errors
        """
        batters = await self.get_players(PlayerType.BATTERS)
        pitchers = await self.get_players(PlayerType.PITCHERS)

        target = normalize_name(name)
        for player_type, players in ((PlayerType.BATTERS, batters), (PlayerType.PITCHERS, pitchers)):
            for player in players:
                candidate = normalize_name(player.name)
                # Blank names never match
                if candidate and candidate == target:
                    logger.debug(f"Found '{name}' in {player_type.value}: {player}")
                    return PlayerMatch(player=player, player_type=player_type)

        logger.debug(f"No player named '{name}' among {len(batters)} batters and {len(pitchers)} pitchers")
        return None

    async def mark_drafted(
        self,
        match: PlayerMatch,
        pick: DraftPickEvent,
        team_abbrev: str,
        drafted_at: Optional[str] = None
    ) -> DraftedMark:
        """
        Write the drafted mark for a player, then bump the last-updated marker.

        The two writes are not atomic. The mark is authoritative; the marker is
        only a refresh hint, so a failed marker write is logged and not raised.

        Args:
            match: Player and collection found by find_player_by_name
            pick: Parsed draft pick
            team_abbrev: Drafting team abbreviation
            drafted_at: Timestamp override (defaults to now)

        Returns:
            The DraftedMark that was written

        Raises:
            PlayerNotFoundError: If the player has no ID to key the mark by
            APIException: If the drafted mark write fails
        """
        player = match.player
        if not player.has_id:
            raise PlayerNotFoundError(f"Player '{player.name}' has no ID")

        timestamp = drafted_at or utc_timestamp()
        mark = DraftedMark(
            type=match.player_type,
            round=pick.round,
            pick=pick.pick,
            team=team_abbrev,
            drafted_at=timestamp
        )

        await self.put_value(mark.to_store_payload(), DRAFTED_PLAYERS_PATH, player.id)
        logger.info(f"Marked {player} drafted by {team_abbrev} (round {pick.round}, pick {pick.pick})")

        try:
            await self.put_value(utc_timestamp(), LAST_UPDATED_PATH)
        except APIException as e:
            logger.warning(f"Drafted mark for {player.id} written but last-updated marker failed: {e}")

        return mark
