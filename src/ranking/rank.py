"""
Value types for rankings.

- Rank: a team's current, mutable rank value under one ranking
- RankLogEntry: immutable before/after record of one game
- EntryPair: (week, entry or None) returned by per-team history queries
"""

from dataclasses import dataclass
from typing import Optional

from src.league.structure import Team


@dataclass
class Rank:
    """A team's current rank value. Owned by exactly one Ranking."""
    team: Team
    value: float = 0.0

    def __str__(self) -> str:
        return f"{self.team.name} ({self.value:.3f})"


@dataclass(frozen=True)
class RankLogEntry:
    """The effect of one game on both participating teams' ranks."""
    team_a: Team
    team_b: Team
    before_a: float
    before_b: float
    after_a: float
    after_b: float

    def involves(self, team_name: str) -> bool:
        return team_name in (self.team_a.name, self.team_b.name)

    def before(self, team_name: str) -> Optional[float]:
        """Rank value of the named team going into the game."""
        if team_name == self.team_a.name:
            return self.before_a
        if team_name == self.team_b.name:
            return self.before_b
        return None

    def after(self, team_name: str) -> Optional[float]:
        """Rank value of the named team after the game."""
        if team_name == self.team_a.name:
            return self.after_a
        if team_name == self.team_b.name:
            return self.after_b
        return None

    def change(self, team_name: str) -> Optional[float]:
        """Signed change (after - before) for the named team."""
        if not self.involves(team_name):
            return None
        return self.after(team_name) - self.before(team_name)

    def __str__(self) -> str:
        return (f"{self.team_a.name}: {self.before_a:.3f} -> {self.after_a:.3f}, "
                f"{self.team_b.name}: {self.before_b:.3f} -> {self.after_b:.3f}")


@dataclass(frozen=True)
class EntryPair:
    """A week number and the team's entry for it (None on a bye)."""
    week: int
    entry: Optional[RankLogEntry] = None
