"""Game and PlayerRef data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from stationpairing.constants import GAME_COMPLETED, GAME_PENDING
from stationpairing.models.team import Player, Team
from stationpairing.type_hints import GameStatus, MaybeResult


@dataclass(frozen=True)
class PlayerRef:
    """Snapshot of a player as they were when the game was scheduled.

    Names are copied, not referenced, so renaming a player or moving them to
    another team later leaves historical games untouched.
    """

    team_id: str
    team_name: str
    player_id: str
    player_name: str

    @classmethod
    def snapshot(cls, team: Team, player: Player) -> "PlayerRef":
        return cls(
            team_id=team.id,
            team_name=team.name,
            player_id=player.id,
            player_name=player.name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teamId": self.team_id,
            "teamName": self.team_name,
            "playerId": self.player_id,
            "playerName": self.player_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerRef":
        return cls(
            team_id=data["teamId"],
            team_name=data.get("teamName", ""),
            player_id=data["playerId"],
            player_name=data.get("playerName", ""),
        )


@dataclass
class Game:
    """A single game at a station in one round.

    Attributes
    ----------
    id : str
        Unique game identifier.
    station, station_name : str
        Station ID and its display name at scheduling time.
    game_type, game_type_name : str
        Game type ID and its display name at scheduling time.
    team1_players, team2_players : list of PlayerRef
        The two sides. Each side comes from a single team and the two teams
        differ.
    status : str
        ``"pending"`` until a result is recorded, then ``"completed"``.
    result : str or None
        ``"team1-win"``, ``"team2-win"``, ``"draw"`` or None.
    """

    id: str
    station: str
    station_name: str
    game_type: str
    game_type_name: str
    team1_players: List[PlayerRef] = field(default_factory=list)
    team2_players: List[PlayerRef] = field(default_factory=list)
    status: GameStatus = GAME_PENDING
    result: MaybeResult = None

    @property
    def players(self) -> List[PlayerRef]:
        return self.team1_players + self.team2_players

    @property
    def player_ids(self) -> List[str]:
        return [ref.player_id for ref in self.players]

    @property
    def team1_id(self) -> Optional[str]:
        return self.team1_players[0].team_id if self.team1_players else None

    @property
    def team2_id(self) -> Optional[str]:
        return self.team2_players[0].team_id if self.team2_players else None

    @property
    def is_completed(self) -> bool:
        return self.status == GAME_COMPLETED

    def involves(self, player_id: str) -> bool:
        return player_id in self.player_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game to dictionary."""
        return {
            "id": self.id,
            "station": self.station,
            "stationName": self.station_name,
            "gameType": self.game_type,
            "gameTypeName": self.game_type_name,
            "team1Players": [ref.to_dict() for ref in self.team1_players],
            "team2Players": [ref.to_dict() for ref in self.team2_players],
            "status": self.status,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        """Deserialize game from dictionary."""
        return cls(
            id=data["id"],
            station=data["station"],
            station_name=data.get("stationName", data["station"]),
            game_type=data["gameType"],
            game_type_name=data.get("gameTypeName", data["gameType"]),
            team1_players=[PlayerRef.from_dict(p) for p in data.get("team1Players", [])],
            team2_players=[PlayerRef.from_dict(p) for p in data.get("team2Players", [])],
            status=data.get("status", GAME_PENDING),
            result=data.get("result"),
        )
