"""
Display formatting for rankings.

Pure functions over snapshots of ranks and log entries; nothing here
mutates ranking state.
"""

from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from src.ranking.rank import Rank, EntryPair

if TYPE_CHECKING:
    from src.ranking.engine import Ranking


def format_ranking(standings: List[Tuple[int, Rank]]) -> str:
    """
    Format sorted standings as a numbered listing.

    Args:
        standings: (position, Rank) pairs, already sorted

    Returns:
        One "<position>: <team> (<value>)" line per team, wrapped in
        ``#Ranking<[ ... ]>``
    """
    if not standings:
        return "#Ranking<[]>"
    lines = [f"    {position}: {rank}" for position, rank in standings]
    return "#Ranking<[\n" + ",\n".join(lines) + "\n]>"


def format_team_log(team_name: str, pairs: List[EntryPair]) -> str:
    """Format a team's history, one line per game played."""
    lines = [f"{team_name} log:", ""]
    for pair in pairs:
        if pair.entry is not None:
            lines.append(f"Week {pair.week}: {pair.entry}")
    return "\n".join(lines) + "\n"


def format_greatest_change(team_name: str, pair: Optional[EntryPair]) -> str:
    """Describe a team's largest single-game rank change."""
    if pair is None or pair.entry is None:
        return f"{team_name}: no games played"
    change = pair.entry.change(team_name)
    sign = "+" if change >= 0 else ""
    return (f"{team_name}: {sign}{change:.3f} in week {pair.week} "
            f"({pair.entry})")


def format_leaderboard(ranking: 'Ranking', top_n: Optional[int] = None) -> str:
    """
    Format a ranking's standings as an ASCII table.

    Shows each team's games played and its largest single-game change.

    Args:
        ranking: Ranking to display
        top_n: Only show the first top_n teams (all if None)

    Returns:
        Formatted string for terminal display
    """
    standings = ranking.standings()
    if top_n is not None:
        standings = standings[:top_n]

    lines = []
    lines.append(f"=== {str(ranking.policy).upper()} STANDINGS ===")
    lines.append("")
    lines.append(f"{'Rank':<6}{'Team':<24}{'Value':>10}{'GP':>5}{'Max chg':>10}")
    lines.append("-" * 55)

    for position, rank in standings:
        name = rank.team.name
        games = len(ranking.get_team_values(name))
        greatest = ranking.get_greatest_change(name)
        max_change = f"{greatest.entry.change(name):+.2f}" if greatest else "-"
        lines.append(f"{position:<6}{name:<24}{rank.value:>10.3f}{games:>5}{max_change:>10}")

    return "\n".join(lines)


def format_comparison(rankings: Dict[str, 'Ranking'], top_n: Optional[int] = None) -> str:
    """
    Format the positions of every team under several policies side by side.

    Rows follow the first ranking's order.
    """
    if not rankings:
        return ""

    names = list(rankings)
    positions = {
        policy: {rank.team.name: position for position, rank in ranking.standings()}
        for policy, ranking in rankings.items()
    }
    order = [rank.team.name for _, rank in rankings[names[0]].standings()]
    if top_n is not None:
        order = order[:top_n]

    col_width = max(max(len(n) for n in names) + 2, 8)
    lines = []
    lines.append("")
    lines.append("Positions by policy:")
    lines.append("")
    lines.append(f"{'Team':<24}" + "".join(f"{n:>{col_width}}" for n in names))
    for team_name in order:
        row = f"{team_name:<24}"
        for policy in names:
            row += f"{positions[policy][team_name]:>{col_width}}"
        lines.append(row)

    return "\n".join(lines)


def format_run_header(
    policy_name: str,
    num_teams: int,
    num_weeks: int,
    num_games: int
) -> str:
    """Format header information for one ranking run."""
    lines = []
    lines.append(f"Policy: {policy_name}")
    lines.append(f"Teams: {num_teams}")
    lines.append(f"Weeks: {num_weeks}")
    lines.append(f"Games: {num_games}")
    lines.append("")
    return "\n".join(lines)
