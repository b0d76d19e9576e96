"""Tournament data class - the snapshot the scheduler reads from.

Holds the rosters, settings and generated schedule of one tournament, plus
JSON file helpers used by the command line.
"""

# Station Pairing
# Copyright (C) 2025  Station Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from dateutil.parser import isoparse

from stationpairing.constants import CURRENT_TOURNAMENT_VERSION
from stationpairing.exceptions import (
    FileLoadException,
    FileSaveException,
    GameNotFoundException,
    InvalidTournamentDataException,
    RoundNotFoundException,
)
from stationpairing.models.game import Game
from stationpairing.models.migration import migrate_tournament_data
from stationpairing.models.round_data import Round
from stationpairing.models.team import Team
from stationpairing.models.tournament_config import TournamentSettings
from stationpairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


@dataclass
class Tournament:
    """A tournament: teams, settings and (once generated) the schedule.

    Attributes
    ----------
    id : str
        Unique tournament identifier.
    name : str
        Tournament name.
    teams : list of Team
        Participating teams with their rosters.
    settings : TournamentSettings
        Rounds, game types, scoring and timer settings.
    player_pool : list of dict
        Unassigned players kept by the setup screens. Passed through as-is.
    schedule : list of Round
        Generated rounds, empty until a schedule is generated.
    version : int
        Data format version.
    created : datetime or None
        Creation timestamp.
    """

    id: str = field(default_factory=generate_id)
    name: str = "Untitled Tournament"
    teams: List[Team] = field(default_factory=list)
    settings: TournamentSettings = field(default_factory=TournamentSettings)
    player_pool: List[Dict[str, Any]] = field(default_factory=list)
    schedule: List[Round] = field(default_factory=list)
    version: int = CURRENT_TOURNAMENT_VERSION
    created: Optional[datetime] = None

    # ========== Lookups ==========

    def get_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.id == team_id:
                return team
        return None

    def get_round(self, round_number: int) -> Round:
        """Return a scheduled round by number.

        Raises:
            RoundNotFoundException: If the schedule has no such round
        """
        for round_data in self.schedule:
            if round_data.round == round_number:
                return round_data
        raise RoundNotFoundException(f"Round {round_number} is not scheduled")

    def find_game(self, game_id: str) -> Tuple[Round, Game]:
        """Locate a game anywhere in the schedule.

        Raises:
            GameNotFoundException: If no game has that ID
        """
        for round_data in self.schedule:
            for game in round_data.games:
                if game.id == game_id:
                    return round_data, game
        raise GameNotFoundException(f"Game not found: {game_id}")

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "created": self.created.isoformat() if self.created else None,
            "teams": [t.to_dict() for t in self.teams],
            "settings": self.settings.to_dict(),
            "playerPool": list(self.player_pool),
            "schedule": [r.to_dict() for r in self.schedule],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary, upgrading legacy data.

        Raises:
            InvalidTournamentDataException: If required fields are malformed
        """
        if not isinstance(data, dict):
            raise InvalidTournamentDataException("Tournament data must be an object")

        data = migrate_tournament_data(data)

        created = data.get("created")
        if created:
            try:
                created = isoparse(created)
            except (TypeError, ValueError) as e:
                raise InvalidTournamentDataException(
                    f"Invalid creation timestamp {created!r}: {e}"
                ) from e

        try:
            tournament = cls(
                id=str(data.get("id") or generate_id()),
                name=data.get("name", "Untitled Tournament"),
                teams=[Team.from_dict(t) for t in data.get("teams") or []],
                settings=TournamentSettings.from_dict(data.get("settings") or {}),
                player_pool=list(data.get("playerPool") or []),
                schedule=[Round.from_dict(r) for r in data.get("schedule") or []],
                version=data["version"],
                created=created or None,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise InvalidTournamentDataException(f"Malformed tournament data: {e}") from e

        logger.debug(f"Loaded tournament: {tournament.name}")
        return tournament


def load_tournament(path: Union[str, Path]) -> Tournament:
    """Read a tournament from a JSON file.

    Raises:
        FileLoadException: If the file cannot be read or parsed
        InvalidTournamentDataException: If the content is not a valid tournament
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load tournament from {path}: {e}") from e
    return Tournament.from_dict(data)


def save_tournament(tournament: Tournament, path: Union[str, Path]) -> None:
    """Write a tournament to a JSON file.

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(tournament.to_dict(), f, indent=2)
    except OSError as e:
        raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
    logger.info(f"Saved tournament {tournament.name!r} to {path}")
