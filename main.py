#!/usr/bin/env python3
"""
Rank a league's teams over a season under one or more scoring policies.

Usage:
    python main.py data/sample_season.json --policies elo point-diff

Examples:
    # Elo with a preseason baseline, ranks after week 9 only
    python main.py season.json -p elo:24 --baseline preseason.txt \\
        --max-rank 1600 --increment 10 --through-week 9

    # Export each policy's history as CSV and show a team's log
    python main.py season.json -p elo point-diff --csv-dir out --team Patriots
"""

import argparse
import sys

from src.league.serialization import load_season
from src.ranking.engine import RankingStateError
from src.ranking.policies import POLICY_TYPES
from src.ranking.runner import RankingRunner, RankingConfig, load_team_order
from src.ranking.display import format_comparison, format_greatest_change
from src.utils.constants import DEFAULT_INCREMENT, DEFAULT_MAX_RANK


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Rank teams game by game over a season.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Policy specification formats:
  elo                 Elo with K=32
  elo:K               Elo with K-factor K
  point-diff          Point differential, 0.1 rank per point
  point-diff:W        Point differential, W rank per point
'''
    )

    parser.add_argument(
        'season',
        type=str,
        help='Season JSON file'
    )
    parser.add_argument(
        '--policies', '-p',
        type=str, nargs='+', default=['elo'],
        help=f'Policy specs to run (available: {", ".join(POLICY_TYPES)})'
    )
    parser.add_argument(
        '--baseline', '-b',
        type=str, default=None,
        help='File with the preseason ordering, one team per line, best first'
    )
    parser.add_argument(
        '--increment',
        type=float, default=DEFAULT_INCREMENT,
        help=f'Baseline rank step between successive teams (default: {DEFAULT_INCREMENT})'
    )
    parser.add_argument(
        '--max-rank',
        type=float, default=DEFAULT_MAX_RANK,
        help=f'Baseline rank of the first team (default: {DEFAULT_MAX_RANK})'
    )
    parser.add_argument(
        '--through-week', '-w',
        type=int, default=None,
        help='Only apply games up to and including this week'
    )
    parser.add_argument(
        '--csv-dir',
        type=str, default=None,
        help='Directory to write <policy>.csv rank histories to'
    )
    parser.add_argument(
        '--top',
        type=int, default=None,
        help='Only show the top N teams'
    )
    parser.add_argument(
        '--team', '-t',
        type=str, action='append', default=[],
        help='Print the full log and greatest change for a team (repeatable)'
    )
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar while applying weeks'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Minimal output (only final comparison)'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        season = load_season(args.season)
        baseline = load_team_order(args.baseline) if args.baseline else None

        config = RankingConfig(
            policies=args.policies,
            baseline_order=baseline,
            increment=args.increment,
            max_rank=args.max_rank,
            through_week=args.through_week,
            csv_dir=args.csv_dir,
            top_n=args.top
        )
        runner = RankingRunner(
            config=config,
            verbose=not args.quiet,
            show_progress=args.progress
        )
        rankings = runner.run(season)
    except KeyError as e:
        print(f"Error: season file is missing field {e}")
        return 1
    except (OSError, ValueError, RankingStateError) as e:
        print(f"Error: {e}")
        return 1

    if len(rankings) > 1:
        print(format_comparison(rankings, args.top))

    for team_name in args.team:
        for spec, ranking in rankings.items():
            if ranking.get_rank(team_name) is None:
                print(f"\n[{spec}] Unknown team: {team_name}")
                continue
            print(f"\n[{spec}] " + ranking.get_log_for_team(team_name))
            print(format_greatest_change(team_name, ranking.get_greatest_change(team_name)))

    return 0


if __name__ == "__main__":
    sys.exit(main())
