"""
Scoring policies.

- EloPolicy: standard Elo, optionally scaled by margin of victory
    Expected score: E = 1 / (1 + 10^((R_away - R_home) / 400))
    Rating update:  R_new = R_old + K * mult * (S - E)
- PointDifferentialPolicy: ranks move by a fixed weight per point of margin
"""

import math
from typing import Dict, Type

from src.league.structure import Game
from src.ranking.engine import ScoringPolicy
from src.ranking.rank import RankLogEntry
from src.utils.constants import (
    ELO_SCALE, DEFAULT_K_FACTOR, DEFAULT_POINT_WEIGHT, WIN, TIE, LOSS
)


class EloPolicy(ScoringPolicy):
    """
    Standard Elo rating update, zero-sum between the two teams.

    Ranks are used directly as Elo ratings, so seed them with a matching
    baseline (e.g. max 1600, increment 10) rather than the 0..32 default.
    """

    name = "elo"

    def __init__(self, k_factor: float = DEFAULT_K_FACTOR, margin_scale: float = 0.0):
        """
        Args:
            k_factor: Determines rating volatility (default: 32)
            margin_scale: If > 0, scale K by margin_scale * ln(margin + 1)
        """
        if k_factor <= 0:
            raise ValueError(f"k_factor must be positive, got {k_factor}")
        if margin_scale < 0:
            raise ValueError(f"margin_scale must be >= 0, got {margin_scale}")
        self.k_factor = k_factor
        self.margin_scale = margin_scale

    def expected_score(self, rating_a: float, rating_b: float) -> float:
        """
        Calculate expected score for team A against team B.

        Returns:
            Expected score between 0 and 1
        """
        return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / ELO_SCALE))

    def margin_multiplier(self, game: Game) -> float:
        if self.margin_scale <= 0:
            return 1.0
        return self.margin_scale * math.log(max(game.margin, 1) + 1)

    def apply_game(self, game: Game, rank_a: float, rank_b: float) -> RankLogEntry:
        if game.is_tie:
            actual_a = TIE
        elif game.winner == game.home:
            actual_a = WIN
        else:
            actual_a = LOSS

        expected_a = self.expected_score(rank_a, rank_b)
        delta_a = self.k_factor * self.margin_multiplier(game) * (actual_a - expected_a)

        return RankLogEntry(
            team_a=game.home,
            team_b=game.away,
            before_a=rank_a,
            before_b=rank_b,
            after_a=rank_a + delta_a,
            after_b=rank_b - delta_a
        )


class PointDifferentialPolicy(ScoringPolicy):
    """Each team gains weight * (points for - points against)."""

    name = "point-diff"

    def __init__(self, weight: float = DEFAULT_POINT_WEIGHT):
        if weight <= 0:
            raise ValueError(f"weight must be positive, got {weight}")
        self.weight = weight

    def apply_game(self, game: Game, rank_a: float, rank_b: float) -> RankLogEntry:
        differential = game.home_score - game.away_score
        return RankLogEntry(
            team_a=game.home,
            team_b=game.away,
            before_a=rank_a,
            before_b=rank_b,
            after_a=rank_a + self.weight * differential,
            after_b=rank_b - self.weight * differential
        )


# Policy name mapping
POLICY_TYPES: Dict[str, Type[ScoringPolicy]] = {
    EloPolicy.name: EloPolicy,
    PointDifferentialPolicy.name: PointDifferentialPolicy,
}


def parse_policy_spec(spec: str) -> tuple:
    """
    Parse a policy specification string.

    Formats:
        'elo'            -> ('elo', None)
        'elo:24'         -> ('elo', 24.0)
        'point-diff:0.5' -> ('point-diff', 0.5)

    Returns:
        Tuple of (policy_name, parameter or None)

    Raises:
        ValueError: If the parameter is not a number
    """
    if ':' in spec:
        name, param = spec.split(':', 1)
        try:
            return (name.lower(), float(param))
        except ValueError:
            raise ValueError(f"Invalid parameter in policy spec '{spec}': {param}")
    return (spec.lower(), None)


def create_policy(spec: str) -> ScoringPolicy:
    """
    Create a policy from a specification string.

    The optional parameter is the policy's primary setting: the K-factor
    for 'elo', the per-point weight for 'point-diff'.
    """
    name, param = parse_policy_spec(spec)

    if name not in POLICY_TYPES:
        raise ValueError(f"Unknown policy: {name}. "
                         f"Available: {list(POLICY_TYPES.keys())}")

    policy_class = POLICY_TYPES[name]
    if param is None:
        return policy_class()
    return policy_class(param)
