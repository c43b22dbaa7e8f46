"""
League and schedule structure.

A plain ownership hierarchy: League -> Conference -> Division -> Team, plus
a Season holding ordered Weeks of completed Games. Lookups are by name and
return None when nothing matches.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Team:
    """A team, identified by its unique name within the league."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Division:
    """A division of teams."""
    name: str
    teams: List[Team] = field(default_factory=list)

    def add_team(self, team_name: str) -> Optional[Team]:
        """Add a team, or return None if one with that name already exists."""
        if self.get_team(team_name) is not None:
            return None
        team = Team(team_name)
        self.teams.append(team)
        return team

    def get_team(self, team_name: str) -> Optional[Team]:
        for team in self.teams:
            if team.name == team_name:
                return team
        return None


@dataclass
class Conference:
    """A conference made up of divisions."""
    name: str
    divisions: List[Division] = field(default_factory=list)

    def add_division(self, division_name: str) -> Optional[Division]:
        """Add a division, or return None if one with that name already exists."""
        if self.get_division(division_name) is not None:
            return None
        division = Division(division_name)
        self.divisions.append(division)
        return division

    def add_team(self, division_name: str, team_name: str) -> Optional[Team]:
        """Add a team to a division of this conference (None if no such division)."""
        division = self.get_division(division_name)
        if division is None:
            return None
        return division.add_team(team_name)

    def get_division(self, division_name: str) -> Optional[Division]:
        for division in self.divisions:
            if division.name == division_name:
                return division
        return None

    def get_teams(self) -> List[Team]:
        teams = []
        for division in self.divisions:
            teams.extend(division.teams)
        return teams


@dataclass
class League:
    """A league made up of conferences."""
    name: str
    conferences: List[Conference] = field(default_factory=list)

    def add_conference(self, conference_name: str) -> Optional[Conference]:
        if self.get_conference(conference_name) is not None:
            return None
        conference = Conference(conference_name)
        self.conferences.append(conference)
        return conference

    def get_conference(self, conference_name: str) -> Optional[Conference]:
        for conference in self.conferences:
            if conference.name == conference_name:
                return conference
        return None

    def get_teams(self) -> List[Team]:
        """All teams in conference, then division, order."""
        teams = []
        for conference in self.conferences:
            teams.extend(conference.get_teams())
        return teams

    def get_team(self, team_name: str) -> Optional[Team]:
        for team in self.get_teams():
            if team.name == team_name:
                return team
        return None


@dataclass(frozen=True)
class Game:
    """A completed game between two teams."""
    home: Team
    away: Team
    home_score: int
    away_score: int

    @property
    def teams(self) -> Tuple[Team, Team]:
        return (self.home, self.away)

    @property
    def is_tie(self) -> bool:
        return self.home_score == self.away_score

    @property
    def winner(self) -> Optional[Team]:
        """The winning team, or None for a tie."""
        if self.is_tie:
            return None
        return self.home if self.home_score > self.away_score else self.away

    @property
    def loser(self) -> Optional[Team]:
        if self.is_tie:
            return None
        return self.away if self.home_score > self.away_score else self.home

    @property
    def margin(self) -> int:
        """Absolute point margin."""
        return abs(self.home_score - self.away_score)

    def score_for(self, team_name: str) -> Optional[int]:
        """Points scored by the named team, or None if it did not play."""
        if team_name == self.home.name:
            return self.home_score
        if team_name == self.away.name:
            return self.away_score
        return None

    def __str__(self) -> str:
        return (f"{self.away.name} {self.away_score} @ "
                f"{self.home.name} {self.home_score}")


@dataclass
class Week:
    """One week of the schedule, games in the order they are applied."""
    number: int
    games: List[Game] = field(default_factory=list)

    def add_game(self, game: Game):
        self.games.append(game)


@dataclass
class Season:
    """A league's season: its structure plus the ordered weeks of games."""
    year: int
    league: League
    weeks: List[Week] = field(default_factory=list)

    def get_teams(self) -> List[Team]:
        return self.league.get_teams()

    def get_week(self, number: int) -> Optional[Week]:
        for week in self.weeks:
            if week.number == number:
                return week
        return None

    def add_week(self, number: int) -> Week:
        """Get the week with this number, creating it at the end if missing."""
        week = self.get_week(number)
        if week is None:
            week = Week(number)
            self.weeks.append(week)
        return week

    def through_week(self, last_week: int) -> "Season":
        """Copy of this season truncated to weeks numbered <= last_week."""
        return Season(
            year=self.year,
            league=self.league,
            weeks=[Week(w.number, list(w.games)) for w in self.weeks if w.number <= last_week]
        )

    def total_games(self) -> int:
        return sum(len(week.games) for week in self.weeks)
