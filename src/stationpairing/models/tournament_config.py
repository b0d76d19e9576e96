"""TournamentSettings data class."""

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

from stationpairing.constants import DEFAULT_SCORING, DEFAULT_TIMER
from stationpairing.exceptions import InvalidTournamentDataException
from stationpairing.models.game_type import GameType
from stationpairing.utils.validation import validate_number


@dataclass
class TournamentSettings:
    """Tournament configuration settings.

    Attributes
    ----------
    rounds : int
        Number of rounds to schedule.
    game_types : list of GameType
        Configured game types with their stations.
    scoring : dict of str to float
        Points per ``win``, ``draw`` and ``loss``.
    timer : dict
        Round timer settings: ``enabled`` and ``duration`` in minutes.
    """

    rounds: int = 0
    game_types: List[GameType] = field(default_factory=list)
    scoring: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_SCORING))
    timer: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_TIMER))

    @property
    def total_stations(self) -> int:
        return sum(len(gt.stations) for gt in self.game_types)

    def get_game_type(self, game_type_id: str) -> Optional[GameType]:
        for game_type in self.game_types:
            if game_type.id == game_type_id:
                return game_type
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "rounds": self.rounds,
            "gameTypes": [gt.to_dict() for gt in self.game_types],
            "scoring": dict(self.scoring),
            "timer": dict(self.timer),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary."""
        rounds = data.get("rounds", 0)
        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise InvalidTournamentDataException(
                f"Number of rounds must be a whole number: {rounds!r}"
            )

        scoring = dict(DEFAULT_SCORING)
        for key, value in (data.get("scoring") or {}).items():
            result = validate_number(value, f"Scoring value {key!r}")
            if not result:
                raise InvalidTournamentDataException(result.error_message)
            scoring[key] = value

        timer = dict(DEFAULT_TIMER)
        timer.update(data.get("timer") or {})

        return cls(
            rounds=rounds,
            game_types=[GameType.from_dict(gt) for gt in data.get("gameTypes") or []],
            scoring=scoring,
            timer=timer,
        )
