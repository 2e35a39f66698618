"""
Draft pick model

Represents a draft pick announcement parsed from a Slack message.
Produced per incoming message and never persisted on its own.
"""
from pydantic import Field

from models.base import DraftBaseModel


class DraftPickEvent(DraftBaseModel):
    """A team's selection of a player at a given round and pick."""

    round: int = Field(..., ge=1, description="Draft round")
    pick: int = Field(..., ge=1, description="Pick within the round")
    overall: int = Field(..., description="Overall pick number (logged only)")
    team_name: str = Field(..., min_length=1, description="Full franchise name as announced")
    position: str = Field(..., min_length=1, description="Announced position, e.g. P or SP/RP")
    player_name: str = Field(..., min_length=1, description="Player display name as announced")

    def __str__(self):
        return f"Round {self.round}, Pick {self.pick}: {self.team_name} - {self.position} {self.player_name}"
