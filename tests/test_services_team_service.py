"""
Tests for team name resolution
"""
import pytest

from constants import TEAM_ABBREVIATIONS
from services.team_service import TeamService, team_service


class TestTeamService:
    """Test TeamService lookups."""

    def test_known_team(self):
        assert team_service.get_abbrev("Denver Blucifers") == "DEN"

    def test_renamed_franchise_shares_abbreviation(self):
        """Test that both names of the renamed franchise resolve to SPA."""
        assert team_service.get_abbrev("Curacao Blue Wave") == "SPA"
        assert team_service.get_abbrev("Sao Paulo Black Mambas") == "SPA"

    def test_unknown_team(self):
        assert team_service.get_abbrev("Nonexistent Team") is None

    @pytest.mark.parametrize("name", ["denver blucifers", "Denver Blucifers ", "St Lucia Mermen"])
    def test_lookup_is_exact(self, name):
        """Test that lookups are case and punctuation sensitive."""
        assert team_service.get_abbrev(name) is None

    def test_team_names_for(self):
        assert sorted(team_service.team_names_for("SPA")) == ["Curacao Blue Wave", "Sao Paulo Black Mambas"]
        assert team_service.team_names_for("TOK") == ["Tokyo Tigers"]
        assert team_service.team_names_for("XXX") == []

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            TEAM_ABBREVIATIONS["Expansion Team"] = "EXP"

    def test_all_abbreviations_three_letters(self):
        assert len(TEAM_ABBREVIATIONS) == 21
        for abbrev in TEAM_ABBREVIATIONS.values():
            assert len(abbrev) == 3 and abbrev.isupper()

    def test_custom_table(self):
        service = TeamService({"Test Team": "TST"})

        assert service.get_abbrev("Test Team") == "TST"
        assert service.get_abbrev("Denver Blucifers") is None
