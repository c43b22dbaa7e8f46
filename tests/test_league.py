"""
Unit tests for the league structure and season serialization.
"""

import json
import tempfile
from pathlib import Path

import pytest

from src.league.structure import League, Team, Game, Season, Week
from src.league.serialization import (
    serialize_season,
    deserialize_season,
    load_season,
    save_season
)

SAMPLE_SEASON = Path(__file__).parent.parent / "data" / "sample_season.json"


class TestLeagueStructure:
    """Tests for the league hierarchy."""

    def test_team_order(self, league):
        """Test teams are listed in conference, then division, order."""
        assert [t.name for t in league.get_teams()] == ['A', 'B', 'C', 'D']

    def test_duplicate_division_returns_none(self, league):
        conference = league.get_conference("X")
        assert conference.add_division("1") is None

    def test_duplicate_team_returns_none(self, league):
        assert league.get_conference("X").add_team("1", "A") is None

    def test_add_team_unknown_division(self, league):
        assert league.get_conference("X").add_team("9", "E") is None

    def test_lookup_missing(self, league):
        assert league.get_team("Z") is None
        assert league.get_conference("Y") is None


class TestGame:
    """Tests for game result helpers."""

    def test_home_win(self):
        home, away = Team("A"), Team("B")
        game = Game(home, away, 21, 14)
        assert game.winner == home
        assert game.loser == away
        assert game.margin == 7
        assert not game.is_tie

    def test_away_win(self):
        home, away = Team("A"), Team("B")
        game = Game(home, away, 10, 17)
        assert game.winner == away
        assert game.loser == home

    def test_tie(self):
        game = Game(Team("A"), Team("B"), 3, 3)
        assert game.is_tie
        assert game.winner is None
        assert game.loser is None

    def test_score_for(self):
        game = Game(Team("A"), Team("B"), 21, 14)
        assert game.score_for("A") == 21
        assert game.score_for("B") == 14
        assert game.score_for("C") is None


class TestSeason:
    """Tests for season helpers."""

    def test_total_games(self, season):
        assert season.total_games() == 5

    def test_through_week(self, season):
        truncated = season.through_week(2)
        assert [w.number for w in truncated.weeks] == [1, 2]
        assert truncated.total_games() == 4
        # Original is untouched
        assert season.total_games() == 5

    def test_add_week_reuses_existing(self, season):
        assert season.add_week(2) is season.get_week(2)
        new_week = season.add_week(4)
        assert season.weeks[-1] is new_week


class TestSerialization:
    """Tests for loading and saving seasons."""

    def test_load_sample(self):
        """Test the bundled sample season loads with unplayed games dropped."""
        season = load_season(SAMPLE_SEASON)

        assert season.year == 2017
        assert [t.name for t in season.get_teams()] == ['Patriots', 'Jets', 'Eagles', 'Giants']
        assert season.total_games() == 5
        assert season.get_week(4).games == []

    def test_load_through_week(self):
        season = load_season(SAMPLE_SEASON, through_week=2)
        assert [w.number for w in season.weeks] == [1, 2]
        assert season.total_games() == 3

    def test_weeks_sorted_on_load(self, season):
        data = serialize_season(season)
        data['weeks'].reverse()

        loaded = deserialize_season(data)

        assert [w.number for w in loaded.weeks] == [1, 2, 3]

    def test_string_week_numbers_sorted_numerically(self, season):
        data = serialize_season(season)
        for week_data in data['weeks']:
            week_data['number'] = str(week_data['number'] + 7)

        loaded = deserialize_season(data, through_week=9)

        assert [w.number for w in loaded.weeks] == [8, 9]
        assert loaded.total_games() == 4

    def test_unknown_team_raises(self, season):
        data = serialize_season(season)
        data['weeks'][0]['games'][0]['home'] = 'Z'

        with pytest.raises(ValueError, match="unknown team"):
            deserialize_season(data)

    def test_duplicate_team_raises(self, season):
        data = serialize_season(season)
        data['league']['conferences'][0]['divisions'][1]['teams'].append('A')

        with pytest.raises(ValueError, match="Duplicate team"):
            deserialize_season(data)

    def test_save_and_load(self, season):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "season.json"
            save_season(season, path)

            with open(path) as f:
                assert json.load(f)['year'] == 2017

            loaded = load_season(path)

        assert loaded == season
