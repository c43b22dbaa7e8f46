"""
Serialization utilities for league seasons.

Converts a Season to/from JSON-serializable dictionaries for:
- Loading schedules and results from disk
- Saving a (possibly truncated) season for later runs

Format:
    {
        "year": 2017,
        "league": {
            "name": "NFL",
            "conferences": [
                {"name": "AFC", "divisions": [
                    {"name": "East", "teams": ["Patriots", "Jets", ...]}
                ]}
            ]
        },
        "weeks": [
            {"number": 1, "games": [
                {"home": "Patriots", "away": "Chiefs",
                 "home_score": 27, "away_score": 42}
            ]}
        ]
    }

A game with a null score has not been played yet and is skipped on load.
"""
import json
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

from src.league.structure import League, Season, Week, Game


def serialize_league(league: League) -> Dict[str, Any]:
    """Serialize the conference/division/team hierarchy."""
    return {
        "name": league.name,
        "conferences": [
            {
                "name": conference.name,
                "divisions": [
                    {
                        "name": division.name,
                        "teams": [team.name for team in division.teams]
                    }
                    for division in conference.divisions
                ]
            }
            for conference in league.conferences
        ]
    }


def deserialize_league(data: Dict[str, Any]) -> League:
    """
    Deserialize a league hierarchy.

    Raises:
        ValueError: If a conference, division or team name is repeated
    """
    league = League(data.get("name", "League"))
    for conf_data in data.get("conferences", []):
        conference = league.add_conference(conf_data["name"])
        if conference is None:
            raise ValueError(f"Duplicate conference: {conf_data['name']}")
        for div_data in conf_data.get("divisions", []):
            if conference.add_division(div_data["name"]) is None:
                raise ValueError(
                    f"Duplicate division: {conf_data['name']} {div_data['name']}"
                )
            for team_name in div_data.get("teams", []):
                if league.get_team(team_name) is not None:
                    raise ValueError(f"Duplicate team: {team_name}")
                conference.add_team(div_data["name"], team_name)
    return league


def serialize_game(game: Game) -> Dict[str, Any]:
    return {
        "home": game.home.name,
        "away": game.away.name,
        "home_score": game.home_score,
        "away_score": game.away_score
    }


def deserialize_game(game_data: Dict[str, Any], league: League) -> Optional[Game]:
    """
    Deserialize a game, resolving team names against the league.

    Returns:
        The Game, or None if it has not been played (a score is missing)

    Raises:
        ValueError: If either team is not part of the league
    """
    if game_data.get("home_score") is None or game_data.get("away_score") is None:
        return None

    home = league.get_team(game_data["home"])
    away = league.get_team(game_data["away"])
    if home is None or away is None:
        missing = game_data["home"] if home is None else game_data["away"]
        raise ValueError(f"Game references unknown team: {missing}")

    return Game(
        home=home,
        away=away,
        home_score=int(game_data["home_score"]),
        away_score=int(game_data["away_score"])
    )


def serialize_season(season: Season) -> Dict[str, Any]:
    """Serialize a full season to a JSON-compatible dictionary."""
    return {
        "year": season.year,
        "league": serialize_league(season.league),
        "weeks": [
            {
                "number": week.number,
                "games": [serialize_game(game) for game in week.games]
            }
            for week in season.weeks
        ]
    }


def deserialize_season(data: Dict[str, Any], through_week: Optional[int] = None) -> Season:
    """
    Deserialize a season.

    Weeks are sorted by number so games are always applied chronologically.

    Args:
        data: Dictionary in the format described in the module docstring
        through_week: If given, weeks numbered after this are dropped

    Returns:
        Season containing only completed games
    """
    league = deserialize_league(data["league"])
    season = Season(year=int(data.get("year", 0)), league=league)

    weeks_data: List[Dict[str, Any]] = sorted(data.get("weeks", []), key=lambda w: int(w["number"]))
    for week_data in weeks_data:
        number = int(week_data["number"])
        if through_week is not None and number > through_week:
            break
        week = season.add_week(number)
        for game_data in week_data.get("games", []):
            game = deserialize_game(game_data, league)
            if game is not None:
                week.add_game(game)

    return season


def load_season(path: Union[str, Path], through_week: Optional[int] = None) -> Season:
    """Load a season from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    return deserialize_season(data, through_week=through_week)


def save_season(season: Season, path: Union[str, Path]):
    """Write a season to a JSON file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(serialize_season(season), f, indent=2)
