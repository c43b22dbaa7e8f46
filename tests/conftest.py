"""
Shared fixtures: a four-team league and a three-week season.

Schedule (home team first):
    Week 1: A 21-14 B, C 10-17 D
    Week 2: B 3-3 C (tie), D 28-24 A
    Week 3: A 30-0 C          (B and D on bye)
"""

import pytest

from src.league.structure import League, Season, Week, Game
from src.ranking.engine import ScoringPolicy
from src.ranking.rank import RankLogEntry


class StepPolicy(ScoringPolicy):
    """Winner +1, loser -1, tie leaves both ranks unchanged."""

    name = "step"

    def apply_game(self, game, rank_a, rank_b):
        if game.is_tie:
            delta = 0.0
        elif game.winner == game.home:
            delta = 1.0
        else:
            delta = -1.0
        return RankLogEntry(game.home, game.away, rank_a, rank_b, rank_a + delta, rank_b - delta)


@pytest.fixture
def league():
    league = League("Test League")
    conference = league.add_conference("X")
    conference.add_division("1")
    conference.add_division("2")
    conference.add_team("1", "A")
    conference.add_team("1", "B")
    conference.add_team("2", "C")
    conference.add_team("2", "D")
    return league


@pytest.fixture
def teams(league):
    return league.get_teams()


@pytest.fixture
def season(league):
    a, b, c, d = (league.get_team(n) for n in "ABCD")
    return Season(
        year=2017,
        league=league,
        weeks=[
            Week(1, [Game(a, b, 21, 14), Game(c, d, 10, 17)]),
            Week(2, [Game(b, c, 3, 3), Game(d, a, 28, 24)]),
            Week(3, [Game(a, c, 30, 0)]),
        ]
    )


@pytest.fixture
def step_policy():
    return StepPolicy()
