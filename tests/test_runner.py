"""
Integration tests for the ranking runner, display helpers and CLI.
"""

import json
import tempfile
from pathlib import Path

import pytest

from main import main
from src.ranking.engine import Ranking, UnknownTeamError
from src.ranking.runner import RankingRunner, RankingConfig, load_team_order, csv_filename
from src.ranking.display import (
    format_ranking,
    format_team_log,
    format_greatest_change,
    format_leaderboard,
    format_comparison,
    format_run_header
)

DATA_DIR = Path(__file__).parent.parent / "data"


class TestRankingRunner:
    """Tests for RankingRunner."""

    def test_one_ranking_per_policy(self, season):
        config = RankingConfig(policies=['elo', 'point-diff'])
        rankings = RankingRunner(config, verbose=False).run(season)

        assert list(rankings) == ['elo', 'point-diff']
        assert rankings['elo'] is not rankings['point-diff']
        for ranking in rankings.values():
            assert isinstance(ranking, Ranking)
            assert ranking.games_applied == 5

    def test_through_week(self, season):
        config = RankingConfig(policies=['elo'], through_week=1)
        rankings = RankingRunner(config, verbose=False).run(season)

        assert rankings['elo'].games_applied == 2
        assert rankings['elo'].log.weeks == [1]

    def test_baseline_applied(self, season):
        config = RankingConfig(
            policies=['point-diff'],
            baseline_order=['D', 'C', 'B', 'A'],
            increment=1.0,
            max_rank=32.0
        )
        ranking = RankingRunner(config, verbose=False).run(season)['point-diff']

        pairs = [p for p in ranking.get_pairs_for_team('D') if p.entry]
        assert pairs[0].entry.before('D') == 32.0

    def test_baseline_unknown_team(self, season):
        config = RankingConfig(policies=['elo'], baseline_order=['A', 'Z'])
        with pytest.raises(UnknownTeamError):
            RankingRunner(config, verbose=False).run(season)

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            RankingRunner(RankingConfig(policies=['even-play']), verbose=False)

    def test_no_policies(self):
        with pytest.raises(ValueError):
            RankingRunner(RankingConfig(policies=[]), verbose=False)

    def test_csv_export(self, season):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = RankingConfig(policies=['elo:24', 'point-diff'], csv_dir=tmpdir)
            rankings = RankingRunner(config, verbose=False).run(season)

            for spec, ranking in rankings.items():
                path = Path(tmpdir) / csv_filename(spec)
                assert path.read_text() == ranking.get_csv_data()

    def test_csv_filename(self):
        assert csv_filename('elo:24') == 'elo_24.csv'
        assert csv_filename('point-diff') == 'point-diff.csv'

    def test_verbose_output(self, season, capsys):
        RankingRunner(RankingConfig(policies=['elo']), verbose=True).run(season)
        out = capsys.readouterr().out

        assert "Policy: elo" in out
        assert "Games: 5" in out
        assert "=== ELO STANDINGS ===" in out

    def test_load_team_order(self):
        names = load_team_order(DATA_DIR / "sample_preseason.txt")
        assert names == ['Patriots', 'Eagles', 'Giants', 'Jets']


class TestDisplay:
    """Tests for display formatting."""

    @pytest.fixture
    def ranking(self, teams, season, step_policy):
        ranking = Ranking(teams, step_policy)
        ranking.apply_games(season)
        return ranking

    def test_format_ranking_empty(self):
        assert format_ranking([]) == "#Ranking<[]>"

    def test_format_team_log_skips_byes(self, ranking):
        text = format_team_log("D", ranking.get_pairs_for_team("D"))
        assert text.count("Week") == 2

    def test_format_greatest_change(self, ranking):
        text = format_greatest_change("A", ranking.get_greatest_change("A"))
        assert text.startswith("A: +1.000 in week 1")

    def test_format_greatest_change_none(self):
        assert format_greatest_change("Z", None) == "Z: no games played"

    def test_leaderboard(self, ranking):
        text = format_leaderboard(ranking, top_n=2)
        lines = text.split("\n")

        assert lines[0] == "=== STEP STANDINGS ==="
        assert len(lines) == 4 + 2
        assert lines[4].startswith("1     D")

    def test_comparison(self, teams, season, step_policy):
        first = Ranking(teams, step_policy)
        first.apply_games(season)
        second = Ranking(teams, step_policy)

        text = format_comparison({'step': first, 'unplayed': second})

        assert "Positions by policy:" in text
        assert text.split("\n")[-4].split() == ['D', '1', '4']

    def test_comparison_empty(self):
        assert format_comparison({}) == ""

    def test_run_header(self):
        header = format_run_header('elo', 4, 3, 5)
        assert header.split("\n")[:4] == ['Policy: elo', 'Teams: 4', 'Weeks: 3', 'Games: 5']


class TestMain:
    """Tests for the command line entry point."""

    def test_sample_season(self, capsys):
        code = main([
            str(DATA_DIR / "sample_season.json"),
            '-p', 'elo', 'point-diff',
            '--baseline', str(DATA_DIR / "sample_preseason.txt"),
            '--team', 'Patriots',
            '--quiet'
        ])
        out = capsys.readouterr().out

        assert code == 0
        assert "Positions by policy:" in out
        assert "Patriots log:" in out
        assert "Week 3" in out

    def test_unknown_team_option(self, capsys):
        code = main([str(DATA_DIR / "sample_season.json"), '--team', 'Z', '-q'])
        assert code == 0
        assert "Unknown team: Z" in capsys.readouterr().out

    def test_missing_file(self, capsys):
        code = main(['does_not_exist.json', '-q'])
        assert code == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_invalid_policy(self, capsys):
        code = main([str(DATA_DIR / "sample_season.json"), '-p', 'bogus', '-q'])
        assert code == 1

    def test_malformed_season_file(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "season.json"
            path.write_text(json.dumps({"year": 2017, "weeks": []}))

            code = main([str(path), '-q'])

        assert code == 1
        assert capsys.readouterr().out.startswith("Error: season file is missing field 'league'")
