"""
Ranking module for tracking team ranks over a season.

Provides:
- Ranking: Per-policy rank state and game application
- RankLog: Append-only history of rank changes
- ScoringPolicy / EloPolicy / PointDifferentialPolicy: Rank update rules
- RankingRunner: Runs several policies over one season
"""

from src.ranking.rank import Rank, RankLogEntry, EntryPair
from src.ranking.log import RankLog
from src.ranking.engine import (
    Ranking,
    ScoringPolicy,
    UnknownTeamError,
    DuplicateTeamError,
    RankingStateError
)
from src.ranking.policies import EloPolicy, PointDifferentialPolicy, POLICY_TYPES, create_policy
from src.ranking.runner import RankingRunner, RankingConfig, load_team_order
from src.ranking.display import format_ranking, format_leaderboard, format_comparison

__all__ = [
    'Rank',
    'RankLogEntry',
    'EntryPair',
    'RankLog',
    'Ranking',
    'ScoringPolicy',
    'UnknownTeamError',
    'DuplicateTeamError',
    'RankingStateError',
    'EloPolicy',
    'PointDifferentialPolicy',
    'POLICY_TYPES',
    'create_policy',
    'RankingRunner',
    'RankingConfig',
    'load_team_order',
    'format_ranking',
    'format_leaderboard',
    'format_comparison',
]
