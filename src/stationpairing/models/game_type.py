"""Station and GameType data classes."""

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

from stationpairing.constants import DEFAULT_PARTNER_MODE, PARTNER_MODES
from stationpairing.exceptions import InvalidTournamentDataException
from stationpairing.type_hints import PartnerMode
from stationpairing.utils.validation import (
    require_choice,
    require_non_empty,
    require_positive_integer,
)


@dataclass(frozen=True)
class Station:
    """A physical place where one game is played per round."""

    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Station":
        station_id = require_non_empty(data.get("id"), "Station id")
        return cls(id=station_id, name=str(data.get("name", station_id)))


@dataclass
class GameType:
    """A kind of contest and the stations it is played on.

    Attributes
    ----------
    id : str
        Unique game type identifier.
    name : str
        Display name, e.g. "Darts".
    players_per_team : int
        Players on each side of a game.
    partner_mode : str or None
        ``"fixed"`` or ``"rotating"``; only meaningful when
        ``players_per_team > 1``. ``None`` means not configured.
    stations : list of Station
        Stations where this game type is played.
    """

    id: str
    name: str
    players_per_team: int = 1
    partner_mode: Optional[PartnerMode] = None
    stations: List[Station] = field(default_factory=list)

    @property
    def effective_partner_mode(self) -> str:
        """Partner mode used for scheduling; unset modes rotate."""
        return self.partner_mode or DEFAULT_PARTNER_MODE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game type to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "playersPerTeam": self.players_per_team,
            "stations": [s.to_dict() for s in self.stations],
        }
        if self.partner_mode is not None:
            data["partnerMode"] = self.partner_mode
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameType":
        """Deserialize game type from dictionary."""
        name = str(data.get("name", ""))
        stations = data.get("stations") or []
        if not isinstance(stations, list):
            raise InvalidTournamentDataException(f"{name}: stations must be a list")

        partner_mode = data.get("partnerMode") or None
        if partner_mode is not None:
            partner_mode = require_choice(partner_mode, PARTNER_MODES, f"{name} partner mode")

        return cls(
            id=require_non_empty(data.get("id"), "Game type id"),
            name=name,
            players_per_team=require_positive_integer(
                data.get("playersPerTeam", 1), f"{name} players per team"
            ),
            partner_mode=partner_mode,
            stations=[Station.from_dict(s) for s in stations],
        )
