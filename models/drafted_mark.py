"""
Drafted mark model

The record written to draftData/draftedPlayerIds/<ID> when a pick is announced.
"""
from pydantic import Field

from constants import DRAFT_SOURCE
from models.base import DraftBaseModel
from models.player import PlayerType


class DraftedMark(DraftBaseModel):
    """Drafted status for a single player, keyed by player ID in the store."""

    type: PlayerType = Field(..., description="Collection the player was found in")
    round: int = Field(..., ge=1, description="Draft round")
    pick: int = Field(..., ge=1, description="Pick within the round")
    team: str = Field(..., description="Drafting team abbreviation")
    drafted_at: str = Field(..., alias='draftedAt', description="ISO-8601 UTC timestamp")
    source: str = Field(DRAFT_SOURCE, description="Origin of the mark")

    def to_store_payload(self) -> dict:
        """Serialize with the store's field names."""
        return self.model_dump(by_alias=True)
