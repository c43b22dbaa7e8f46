"""
Ranking engine.

A Ranking owns one Rank per team and a RankLog. It walks a season's weeks
in order, and the games of each week in order, handing every game to a
ScoringPolicy and recording the resulting RankLogEntry.

The concept of a ranking:
- A team's rank is an arbitrary float whose meaning depends on the policy.
- A team's standing is its position relative to the other teams' ranks.
- Ranks only change through completed games (or one-time baseline seeding).
- Every change is logged with both teams' before/after values.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple, Union

from src.league.structure import Team, Game, Week, Season
from src.ranking.rank import Rank, RankLogEntry, EntryPair
from src.ranking.log import RankLog
from src.ranking.display import format_ranking, format_team_log
from src.utils.constants import DEFAULT_INCREMENT, DEFAULT_MAX_RANK, INITIAL_RANK, FIRST_WEEK


class UnknownTeamError(ValueError):
    """A game or baseline ordering names a team the ranking does not know."""


class DuplicateTeamError(ValueError):
    """The same team name was given more than once."""


class RankingStateError(RuntimeError):
    """An operation was called at the wrong point in a ranking's lifecycle."""


class ScoringPolicy(ABC):
    """
    Abstract base class for scoring policies.

    A policy is the only variable part of a ranking: given a game and both
    teams' current rank values it decides their new values.
    """

    name = "policy"

    @abstractmethod
    def apply_game(self, game: Game, rank_a: float, rank_b: float) -> RankLogEntry:
        """
        Compute new ranks for the two teams of a game.

        Args:
            game: The completed game
            rank_a: Current rank of game.home
            rank_b: Current rank of game.away

        Returns:
            RankLogEntry with team_a=game.home, team_b=game.away and both
            teams' before/after values
        """
        pass

    def __str__(self) -> str:
        return self.name


TeamLike = Union[Team, str]


def _team_name(team: TeamLike) -> str:
    return team.name if isinstance(team, Team) else team


class Ranking:
    """
    Ranks a fixed roster of teams under one scoring policy.

    Usage:
        ranking = Ranking(season.get_teams(), EloPolicy())
        ranking.generate_baseline_ranking(preseason_order, 1.0, 32)
        ranking.apply_games(season)
        print(ranking)
    """

    def __init__(
        self,
        teams: Iterable[Team],
        policy: ScoringPolicy,
        initial_rank: float = INITIAL_RANK,
        first_week: int = FIRST_WEEK
    ):
        """
        Args:
            teams: Roster; names must be unique
            policy: Scoring policy applied to every game
            initial_rank: Value every Rank starts at
            first_week: Number of the season's first week (for log queries)

        Raises:
            DuplicateTeamError: If two teams share a name
        """
        teams = list(teams)
        self.policy = policy
        self.ranks: Dict[str, Rank] = {}
        for team in teams:
            if team.name in self.ranks:
                raise DuplicateTeamError(f"Duplicate team: {team.name}")
            self.ranks[team.name] = Rank(team, initial_rank)

        self.log = RankLog(teams, first_week=first_week)
        self.games_applied = 0

    def generate_baseline_ranking(
        self,
        team_names: List[str],
        increment: float = DEFAULT_INCREMENT,
        max_rank: float = DEFAULT_MAX_RANK
    ):
        """
        Seed pre-season ranks from an ordering, best team first.

        The i-th team (0-based) gets ``max_rank - i * increment``. Teams not in
        ``team_names`` keep their current rank. With
        ``["Patriots", "Eagles", "Saints"]``, increment 1.0 and max 32 the
        ranks are 32.0, 31.0 and 30.0.

        Raises:
            RankingStateError: If any game has already been applied
            UnknownTeamError: If a name is not on the roster
            DuplicateTeamError: If a name appears twice
        """
        if self.games_applied:
            raise RankingStateError("Baseline ranks must be generated before any game is applied")

        unknown = [name for name in team_names if name not in self.ranks]
        if unknown:
            raise UnknownTeamError(f"Unknown teams in baseline ordering: {unknown}")
        if len(set(team_names)) != len(team_names):
            raise DuplicateTeamError("Baseline ordering lists a team more than once")

        for position, name in enumerate(team_names):
            self.ranks[name].value = float(max_rank - position * increment)

    def apply_games(self, season: Union[Season, Iterable[Week]]):
        """
        Apply every game of a season, week by week, in order.

        The whole season is checked first, so a game naming an unknown team,
        or a week out of order, fails before any rank changes.

        Raises:
            UnknownTeamError: If a game references a team not on the roster
            RankingStateError: If week numbers go backwards
        """
        weeks = self.validate_games(season)
        for week in weeks:
            self._apply_week(week)

    def apply_week(self, week: Week):
        """
        Apply the games of a single week, in order.

        Raises:
            UnknownTeamError: If a game references a team not on the roster
            RankingStateError: If a later week has already been logged
        """
        self._validate_week(week, self.log.last_week)
        self._apply_week(week)

    def validate_games(self, season: Union[Season, Iterable[Week]]) -> List[Week]:
        """
        Check that every game only references teams on the roster and that
        week numbers never decrease, starting from the latest logged week.

        Returns:
            The weeks, as a list

        Raises:
            UnknownTeamError: On the first game naming an unknown team
            RankingStateError: On the first week numbered below its predecessor
        """
        weeks = season.weeks if isinstance(season, Season) else list(season)
        previous = self.log.last_week
        for week in weeks:
            self._validate_week(week, previous)
            previous = week.number
        return weeks

    def _validate_week(self, week: Week, previous: Optional[int] = None):
        # History is read back by week number, so it can only grow forwards
        if previous is not None and week.number < previous:
            raise RankingStateError(
                f"Week {week.number} cannot be applied after week {previous}"
            )
        for game in week.games:
            for team in game.teams:
                if team.name not in self.ranks:
                    raise UnknownTeamError(
                        f"Week {week.number} game '{game}' references unknown team: {team.name}"
                    )

    def _apply_week(self, week: Week):
        for game in week.games:
            entry = self._apply_game(game)
            self.log.add_entry(week.number, entry)

    def _apply_game(self, game: Game) -> RankLogEntry:
        """Run the policy for one game and store the new ranks."""
        rank_a = self._require_rank(game.home.name)
        rank_b = self._require_rank(game.away.name)

        entry = self.policy.apply_game(game, rank_a.value, rank_b.value)
        if entry.team_a.name != game.home.name or entry.team_b.name != game.away.name:
            raise ValueError(
                f"Policy '{self.policy}' returned an entry for "
                f"{entry.team_a.name} vs {entry.team_b.name}, expected "
                f"{game.home.name} vs {game.away.name}"
            )
        if entry.before_a != rank_a.value or entry.before_b != rank_b.value:
            raise ValueError(
                f"Policy '{self.policy}' returned before values "
                f"{entry.before_a}, {entry.before_b}, expected current ranks "
                f"{rank_a.value}, {rank_b.value}"
            )

        rank_a.value = float(entry.after_a)
        rank_b.value = float(entry.after_b)
        self.games_applied += 1
        return entry

    def _require_rank(self, team_name: str) -> Rank:
        rank = self.ranks.get(team_name)
        if rank is None:
            raise UnknownTeamError(f"Unknown team: {team_name}")
        return rank

    def get_rank(self, team_name: str) -> Optional[Rank]:
        """The team's Rank, or None if it is not on the roster."""
        return self.ranks.get(team_name)

    def get_greater_rank(self, team_a: TeamLike, team_b: TeamLike) -> Rank:
        """The higher of two teams' ranks; the first team wins ties."""
        rank_a = self._require_rank(_team_name(team_a))
        rank_b = self._require_rank(_team_name(team_b))
        return rank_a if rank_a.value >= rank_b.value else rank_b

    def get_log_for_team(self, team_name: str) -> str:
        """Readable list of a team's entries; empty for unknown teams."""
        if team_name not in self.ranks:
            return ""
        return format_team_log(team_name, self.log.get_pairs_for_team(team_name))

    def get_pairs_for_team(self, team_name: str) -> List[EntryPair]:
        return self.log.get_pairs_for_team(team_name)

    def get_team_values(self, team_name: str) -> List[float]:
        return self.log.get_team_values(team_name)

    def get_all_values(self) -> Dict[str, List[float]]:
        return self.log.get_all_values()

    def get_csv_data(self) -> str:
        return self.log.get_csv_data()

    def get_greatest_change(self, team_name: str) -> Optional[EntryPair]:
        return self.log.get_greatest_change(team_name)

    def standings(self) -> List[Tuple[int, Rank]]:
        """
        Snapshot of all ranks sorted by value, descending, numbered from 1.

        Teams with equal values keep roster order.
        """
        ordered = sorted(self.ranks.values(), key=lambda r: r.value, reverse=True)
        return [(i, Rank(rank.team, rank.value)) for i, rank in enumerate(ordered, 1)]

    def __str__(self) -> str:
        return format_ranking(self.standings())
