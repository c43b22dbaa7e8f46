"""
Ranking runner that evaluates several policies over one season.

Handles baseline seeding, week-by-week game application, progress
reporting and CSV export. Each policy gets its own independent Ranking.
"""

import time
from pathlib import Path
from typing import List, Dict, Optional, Union
from dataclasses import dataclass, field

from tqdm import tqdm

from src.league.structure import Season
from src.ranking.engine import Ranking
from src.ranking.policies import create_policy
from src.ranking.display import format_run_header, format_leaderboard
from src.utils.constants import DEFAULT_INCREMENT, DEFAULT_MAX_RANK


@dataclass
class RankingConfig:
    """Configuration for a ranking run."""
    policies: List[str] = field(default_factory=lambda: ['elo'])
    baseline_order: Optional[List[str]] = None
    increment: float = DEFAULT_INCREMENT
    max_rank: float = DEFAULT_MAX_RANK
    through_week: Optional[int] = None
    csv_dir: Optional[str] = None
    top_n: Optional[int] = None


def load_team_order(path: Union[str, Path]) -> List[str]:
    """
    Read a baseline ordering, one team name per line, best team first.

    Blank lines and lines starting with '#' are ignored.
    """
    names = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                names.append(line)
    return names


def csv_filename(policy_spec: str) -> str:
    """File name for a policy's CSV export ('elo:24' -> 'elo_24.csv')."""
    return policy_spec.replace(':', '_') + ".csv"


class RankingRunner:
    """
    Runs every configured policy over a season.

    Usage:
        runner = RankingRunner(RankingConfig(policies=['elo', 'point-diff']))
        rankings = runner.run(season)
    """

    def __init__(
        self,
        config: RankingConfig,
        verbose: bool = True,
        show_progress: bool = False
    ):
        """
        Initialize the runner.

        Args:
            config: Run configuration
            verbose: Print per-policy headers and standings
            show_progress: Show a progress bar over weeks
        """
        self.config = config
        self.verbose = verbose
        self.show_progress = show_progress

        if not config.policies:
            raise ValueError("Need at least 1 policy to rank a season")

        # Validate policy specs up front
        for spec in config.policies:
            create_policy(spec)

    def run(self, season: Season) -> Dict[str, Ranking]:
        """
        Rank the season under every configured policy.

        Args:
            season: Season to apply (truncated to config.through_week if set)

        Returns:
            Dict of policy spec -> completed Ranking
        """
        if self.config.through_week is not None:
            season = season.through_week(self.config.through_week)

        rankings = {}
        for spec in self.config.policies:
            rankings[spec] = self._run_policy(spec, season)

        if self.config.csv_dir:
            self.export_csv(rankings, self.config.csv_dir)

        return rankings

    def _run_policy(self, spec: str, season: Season) -> Ranking:
        """Build, seed and apply one policy's ranking."""
        teams = season.get_teams()
        ranking = Ranking(teams, create_policy(spec))

        if self.verbose:
            print(format_run_header(spec, len(teams), len(season.weeks), season.total_games()))

        if self.config.baseline_order:
            ranking.generate_baseline_ranking(
                self.config.baseline_order,
                self.config.increment,
                self.config.max_rank
            )

        ranking.validate_games(season)

        start_time = time.time()
        for week in tqdm(season.weeks, desc=spec, unit="week", disable=not self.show_progress):
            ranking.apply_week(week)

        if self.verbose:
            elapsed = time.time() - start_time
            print(f"Applied {ranking.games_applied} games in {elapsed:.2f}s")
            print("\n" + format_leaderboard(ranking, self.config.top_n) + "\n")

        return ranking

    def export_csv(self, rankings: Dict[str, Ranking], csv_dir: Union[str, Path]) -> List[Path]:
        """Write each ranking's log to <csv_dir>/<policy>.csv."""
        out_dir = Path(csv_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        paths = []
        for spec, ranking in rankings.items():
            path = out_dir / csv_filename(spec)
            path.write_text(ranking.get_csv_data())
            paths.append(path)
            if self.verbose:
                print(f"Wrote {path}")
        return paths
