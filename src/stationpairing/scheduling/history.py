"""Cross-round scheduling history.

The scheduler folds over rounds: each round reads a :class:`SchedulerState`
and produces a new one. The per-round "who is already playing" set is kept
separately by the scheduler and thrown away at the end of each round.
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

import copy
from collections import Counter
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, List, Optional, Tuple

from stationpairing.constants import (
    VIOLATION_GAME_TYPE_REPEAT,
    VIOLATION_GENERAL_REPEAT,
    VIOLATION_TEAMMATE_REPEAT,
)
from stationpairing.models import Game


def pair_key(player1_id: str, player2_id: str) -> frozenset:
    return frozenset({player1_id, player2_id})


@dataclass(frozen=True)
class Violation:
    """A soft scheduling rule that a generated game had to break.

    Attributes
    ----------
    type : str
        One of the ``VIOLATION_*`` constants.
    round : int
        Round the game was scheduled in.
    description : str
        Human-readable explanation.
    players : tuple of str
        Names of the players involved.
    """

    type: str
    round: int
    description: str
    players: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "round": self.round,
            "description": self.description,
            "players": list(self.players),
        }


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


@dataclass
class SchedulerState:
    """History accumulated across rounds.

    Attributes
    ----------
    game_counts : Counter
        Player ID -> games played so far.
    game_type_counts : dict of str to Counter
        Player ID -> game type ID -> games of that type.
    opponent_counts : Counter
        Pair of player IDs -> times they faced each other.
    game_type_opponent_counts : Counter
        (game type ID, pair) -> times they faced each other at that game type.
    teammate_counts : Counter
        (game type ID, pair) -> times they played on the same side.
    last_activity : dict of str to str
        Player ID -> game type ID of their most recent game.
    rest_rounds : dict of str to list of int
        Player ID -> rounds they sat out.
    violations : list of Violation
        Rematches and repeated partnerships, in scheduling order.
    rounds_scheduled : int
        Number of rounds folded into this state.
    """

    game_counts: Counter = field(default_factory=Counter)
    game_type_counts: Dict[str, Counter] = field(default_factory=dict)
    opponent_counts: Counter = field(default_factory=Counter)
    game_type_opponent_counts: Counter = field(default_factory=Counter)
    teammate_counts: Counter = field(default_factory=Counter)
    last_activity: Dict[str, str] = field(default_factory=dict)
    rest_rounds: Dict[str, List[int]] = field(default_factory=dict)
    violations: List[Violation] = field(default_factory=list)
    rounds_scheduled: int = 0

    def copy(self) -> "SchedulerState":
        """Independent copy; changes to it never reach this state."""
        return copy.deepcopy(self)

    # ========== Queries ==========

    def games_played(self, player_id: str) -> int:
        return self.game_counts[player_id]

    def rest_count(self, player_id: str) -> int:
        return len(self.rest_rounds.get(player_id, []))

    def has_played_against(self, player1_id: str, player2_id: str) -> bool:
        return self.opponent_counts[pair_key(player1_id, player2_id)] > 0

    def times_faced(self, player1_id: str, player2_id: str) -> int:
        return self.opponent_counts[pair_key(player1_id, player2_id)]

    def previous_game_type(self, player_id: str) -> Optional[str]:
        return self.last_activity.get(player_id)

    # ========== Updates (used while building the next state) ==========

    def record_game(
        self, game: Game, round_number: int, fixed_partners: bool = False
    ) -> None:
        """Fold one scheduled game into the history.

        Repeated partnerships are only reported when partners are meant to
        rotate (``fixed_partners`` is False).
        """
        self._check_repeats(game, round_number, check_teammates=not fixed_partners)

        for ref in game.players:
            self.game_counts[ref.player_id] += 1
            self.game_type_counts.setdefault(ref.player_id, Counter())[game.game_type] += 1
            self.last_activity[ref.player_id] = game.game_type

        for side in (game.team1_players, game.team2_players):
            for a, b in combinations(side, 2):
                self.teammate_counts[(game.game_type, pair_key(a.player_id, b.player_id))] += 1

        for a in game.team1_players:
            for b in game.team2_players:
                key = pair_key(a.player_id, b.player_id)
                self.opponent_counts[key] += 1
                self.game_type_opponent_counts[(game.game_type, key)] += 1

    def record_rest(self, player_id: str, round_number: int) -> None:
        self.rest_rounds.setdefault(player_id, []).append(round_number)

    def _check_repeats(
        self, game: Game, round_number: int, check_teammates: bool
    ) -> None:
        for a in game.team1_players:
            for b in game.team2_players:
                key = pair_key(a.player_id, b.player_id)
                same_type = self.game_type_opponent_counts[(game.game_type, key)]
                overall = self.opponent_counts[key]
                if same_type:
                    self.violations.append(
                        Violation(
                            type=VIOLATION_GAME_TYPE_REPEAT,
                            round=round_number,
                            description=(
                                f"Round {round_number}: {a.player_name} and {b.player_name} "
                                f"face each other in {game.game_type_name} for the "
                                f"{_ordinal(same_type + 1)} time"
                            ),
                            players=(a.player_name, b.player_name),
                        )
                    )
                elif overall:
                    self.violations.append(
                        Violation(
                            type=VIOLATION_GENERAL_REPEAT,
                            round=round_number,
                            description=(
                                f"Round {round_number}: {a.player_name} and {b.player_name} "
                                f"face each other for the {_ordinal(overall + 1)} time "
                                "(across different games)"
                            ),
                            players=(a.player_name, b.player_name),
                        )
                    )

        if not check_teammates:
            return

        for side in (game.team1_players, game.team2_players):
            for a, b in combinations(side, 2):
                together = self.teammate_counts[
                    (game.game_type, pair_key(a.player_id, b.player_id))
                ]
                if together:
                    self.violations.append(
                        Violation(
                            type=VIOLATION_TEAMMATE_REPEAT,
                            round=round_number,
                            description=(
                                f"Round {round_number}: {a.player_name} and {b.player_name} "
                                f"partner in {game.game_type_name} for the "
                                f"{_ordinal(together + 1)} time"
                            ),
                            players=(a.player_name, b.player_name),
                        )
                    )
