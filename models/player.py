"""
Player model for store players

Players are owned by the store. Only Name and ID are interpreted here; every
other stat field is carried through untouched.
"""
from enum import Enum
from typing import Optional, Any
from pydantic import ConfigDict, Field, field_validator

from models.base import DraftBaseModel


class PlayerType(str, Enum):
    """Store collections a player can live in, in lookup order."""
    BATTERS = "batters"
    PITCHERS = "pitchers"


class Player(DraftBaseModel):
    """Player record as stored under draftData/<collection>."""

    model_config = ConfigDict(extra='allow')

    name: str = Field(..., alias='Name', min_length=1, description="Player full name")
    id: Optional[str] = Field(None, alias='ID', description="Store player ID")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, value: Any) -> Optional[str]:
        """Store IDs may arrive as numbers; they are keys, so keep them as strings."""
        if value is None:
            return None
        return str(value)

    @property
    def has_id(self) -> bool:
        """Check whether this player can be keyed in the store."""
        return bool(self.id)

    def __str__(self):
        return f"{self.name} ({self.id or 'no ID'})"


class PlayerMatch(DraftBaseModel):
    """A player found by name together with the collection it came from."""

    player: Player
    player_type: PlayerType
