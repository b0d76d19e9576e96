"""Data models for Station Pairing tournaments."""

from stationpairing.models.game import Game, PlayerRef
from stationpairing.models.game_type import GameType, Station
from stationpairing.models.round_data import Round, player_schedule
from stationpairing.models.team import Player, Team
from stationpairing.models.tournament import (
    Tournament,
    load_tournament,
    save_tournament,
)
from stationpairing.models.tournament_config import TournamentSettings

__all__ = [
    "Game",
    "GameType",
    "Player",
    "PlayerRef",
    "Round",
    "Station",
    "Team",
    "Tournament",
    "TournamentSettings",
    "load_tournament",
    "player_schedule",
    "save_tournament",
]
