"""Data model for a scheduled round."""

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
from typing import Any, Dict, List, Optional, Set

from stationpairing.models.game import Game


@dataclass
class Round:
    """Container for all games of a single round.

    Attributes
    ----------
    round : int
        Round number (1-indexed).
    games : list of Game
        Games in the order their stations were filled.
    timer : dict or None
        Round timer state owned by the live view. None when freshly generated.
    """

    round: int
    games: List[Game] = field(default_factory=list)
    timer: Optional[Dict[str, Any]] = None

    @property
    def playing_ids(self) -> Set[str]:
        """IDs of every player with a game this round."""
        return {pid for game in self.games for pid in game.player_ids}

    @property
    def is_completed(self) -> bool:
        return bool(self.games) and all(game.result for game in self.games)

    def game_for_player(self, player_id: str) -> Optional[Game]:
        for game in self.games:
            if game.involves(player_id):
                return game
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "round": self.round,
            "games": [g.to_dict() for g in self.games],
            "timer": self.timer,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        return cls(
            round=data["round"],
            games=[Game.from_dict(g) for g in data.get("games", [])],
            timer=data.get("timer"),
        )


def player_schedule(schedule: List[Round], player_id: str) -> List[Optional[Game]]:
    """List the game a player is in for each round, None for rest rounds."""
    return [round_data.game_for_player(player_id) for round_data in schedule]
