"""
League module: the schedule structure rankings are computed over.

Provides:
- League / Conference / Division / Team: the league hierarchy
- Season / Week / Game: ordered, completed games
- load_season / save_season: JSON ingestion
"""

from src.league.structure import League, Conference, Division, Team, Season, Week, Game
from src.league.serialization import (
    serialize_season,
    deserialize_season,
    load_season,
    save_season,
)

__all__ = [
    'League',
    'Conference',
    'Division',
    'Team',
    'Season',
    'Week',
    'Game',
    'serialize_season',
    'deserialize_season',
    'load_season',
    'save_season',
]
