"""Player and Team data classes."""

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

from stationpairing.constants import PLAYER_STATUSES, STATUS_ACTIVE
from stationpairing.exceptions import InvalidTournamentDataException
from stationpairing.type_hints import PlayerStatus
from stationpairing.utils.validation import require_choice, require_non_empty


@dataclass
class Player:
    """A person on a team roster.

    Attributes
    ----------
    id : str
        Unique player identifier.
    name : str
        Display name.
    status : str
        ``"active"`` or ``"inactive"``. Only active players are scheduled.
    """

    id: str
    name: str
    status: PlayerStatus = STATUS_ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name, "status": self.status}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(
            id=require_non_empty(data.get("id"), "Player id"),
            name=str(data.get("name", "")),
            status=require_choice(
                data.get("status", STATUS_ACTIVE), PLAYER_STATUSES, "Player status"
            ),
        )


@dataclass
class Team:
    """A team and its roster.

    Attributes
    ----------
    id : str
        Unique team identifier.
    name : str
        Display name.
    players : list of Player
        Roster in display order. The order matters for fixed partnerships.
    """

    id: str
    name: str
    players: List[Player] = field(default_factory=list)

    @property
    def active_players(self) -> List[Player]:
        """Active players in roster order."""
        return [p for p in self.players if p.is_active]

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        players = data.get("players", [])
        if not isinstance(players, list):
            raise InvalidTournamentDataException(
                f"Team {data.get('name', data.get('id'))!r}: players must be a list"
            )
        return cls(
            id=require_non_empty(data.get("id"), "Team id"),
            name=str(data.get("name", "")),
            players=[Player.from_dict(p) for p in players],
        )
