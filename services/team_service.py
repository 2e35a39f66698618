"""
Team service for the Slack draft webhook

Resolves announced franchise names to the league's team abbreviations.
"""
import logging
from typing import Optional, List, Mapping

from constants import TEAM_ABBREVIATIONS

logger = logging.getLogger(f'{__name__}.TeamService')


class TeamService:
    """
    Service for team name lookups.

    Lookups are exact and case-sensitive. Several franchise names may share one
    abbreviation when a team was renamed.
    """

    def __init__(self, abbreviations: Mapping[str, str] = TEAM_ABBREVIATIONS):
        """
        Initialize team service.

        Args:
            abbreviations: Franchise name to abbreviation table
        """
        self._abbreviations = abbreviations
        logger.debug(f"TeamService initialized with {len(abbreviations)} teams")

    def get_abbrev(self, team_name: str) -> Optional[str]:
        """
        Get the abbreviation for a franchise name.

        Args:
            team_name: Full franchise name as announced

        Returns:
            Three letter abbreviation, or None for an unrecognized team
        """
        abbrev = self._abbreviations.get(team_name)
        if abbrev is None:
            logger.debug(f"No abbreviation for team '{team_name}'")
        return abbrev

    def team_names_for(self, abbrev: str) -> List[str]:
        """List every franchise name that maps to an abbreviation."""
        return [name for name, code in self._abbreviations.items() if code == abbrev]


# Global service instance
team_service = TeamService()
