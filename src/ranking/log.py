"""
Append-only history of rank changes.

Entries are keyed by week number. Each applied game adds one
(team_name, entry) record per participating team, in game order, so a
team's trajectory can be read back in chronological order.
"""

import csv
import io
from typing import Dict, List, Optional, Tuple, Iterable

import numpy as np

from src.league.structure import Team
from src.ranking.rank import RankLogEntry, EntryPair
from src.utils.constants import FIRST_WEEK


class RankLog:
    """
    History of every RankLogEntry produced by one Ranking.

    Usage:
        log = RankLog(teams)
        log.add_entry(1, entry)
        log.get_team_values("Patriots")
    """

    def __init__(self, teams: Iterable[Team], first_week: int = FIRST_WEEK):
        """
        Args:
            teams: Roster the log is scoped to
            first_week: Number of the season's first week
        """
        self.team_names: List[str] = [team.name for team in teams]
        self.first_week = first_week
        self._entries: Dict[int, List[Tuple[str, RankLogEntry]]] = {}

    def add_entry(self, week: int, entry: RankLogEntry):
        """Append a game's entry under its week, once for each team."""
        records = self._entries.setdefault(week, [])
        records.append((entry.team_a.name, entry))
        records.append((entry.team_b.name, entry))

    @property
    def weeks(self) -> List[int]:
        """Week numbers with at least one entry, ascending."""
        return sorted(self._entries)

    @property
    def last_week(self) -> Optional[int]:
        return max(self._entries) if self._entries else None

    def entries_for_week(self, week: int) -> List[Tuple[str, RankLogEntry]]:
        return list(self._entries.get(week, []))

    def __len__(self) -> int:
        """Total team-entries (two per applied game)."""
        return sum(len(records) for records in self._entries.values())

    def _team_entries(self, team_name: str) -> List[Tuple[int, RankLogEntry]]:
        """(week, entry) for every game the team played, in order."""
        return [
            (week, entry)
            for week in self.weeks
            for name, entry in self._entries[week]
            if name == team_name
        ]

    def get_pairs_for_team(self, team_name: str) -> List[EntryPair]:
        """
        One EntryPair per week from the first week through the latest logged
        week. Weeks the team did not play get a pair with entry=None.
        """
        last_week = self.last_week
        if last_week is None or team_name not in self.team_names:
            return []

        by_week: Dict[int, List[RankLogEntry]] = {}
        for week, entry in self._team_entries(team_name):
            by_week.setdefault(week, []).append(entry)

        pairs = []
        for week in range(min(self.first_week, self.weeks[0]), last_week + 1):
            entries = by_week.get(week)
            if not entries:
                pairs.append(EntryPair(week))
            else:
                pairs.extend(EntryPair(week, entry) for entry in entries)
        return pairs

    def get_team_values(self, team_name: str) -> List[float]:
        """Post-game rank after each game the team played. Byes are omitted."""
        return [entry.after(team_name) for _, entry in self._team_entries(team_name)]

    def get_all_values(self) -> Dict[str, List[float]]:
        return {name: self.get_team_values(name) for name in self.team_names}

    def get_greatest_change(self, team_name: str) -> Optional[EntryPair]:
        """
        The entry with the largest |after - before| for the team.

        Ties go to the earliest game. Returns None if the team never played.
        """
        team_entries = self._team_entries(team_name)
        if not team_entries:
            return None

        changes = np.abs([entry.change(team_name) for _, entry in team_entries])
        # argmax returns the first maximum, i.e. the earliest game
        week, entry = team_entries[int(np.argmax(changes))]
        return EntryPair(week, entry)

    def get_csv_data(self) -> str:
        """
        Render the log as CSV, one row per team-entry.

        Columns are ``week,game,team,opponent,before,after``. Rows follow the
        log: weeks ascending, then games in the order they were applied
        (``game`` is the 1-based position of the game in its week), home team
        first. Values are ``repr`` of the float, so they parse back exactly,
        and a team's ``after`` column read top to bottom is its trajectory.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        writer.writerow(['week', 'game', 'team', 'opponent', 'before', 'after'])

        for week in self.weeks:
            for i, (name, entry) in enumerate(self._entries[week]):
                opponent = entry.team_b.name if name == entry.team_a.name else entry.team_a.name
                writer.writerow([
                    week,
                    i // 2 + 1,
                    name,
                    opponent,
                    repr(float(entry.before(name))),
                    repr(float(entry.after(name)))
                ])

        return buffer.getvalue()
