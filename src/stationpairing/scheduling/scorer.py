"""Matchup scoring.

Higher is better. The weights encode a priority order: avoiding rematches
matters most, then evening out games played, then switching game types. The
random jitter only separates otherwise equal candidates.
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

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from stationpairing.constants import (
    WEIGHT_GAME_COUNT,
    WEIGHT_JITTER,
    WEIGHT_REPEAT_OPPONENT,
    WEIGHT_VARIETY,
)
from stationpairing.models import Player
from stationpairing.scheduling.history import SchedulerState


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the matchup scorer.

    Attributes
    ----------
    game_count : float
        Penalty per game in the average games played by the candidates.
    repeat_opponent : float
        Penalty per cross-team pair that has met before.
    variety : float
        Bonus per player whose previous game was a different game type.
    jitter : float
        Upper bound (exclusive) of the random tie breaker.
    """

    game_count: float = WEIGHT_GAME_COUNT
    repeat_opponent: float = WEIGHT_REPEAT_OPPONENT
    variety: float = WEIGHT_VARIETY
    jitter: float = WEIGHT_JITTER


DEFAULT_WEIGHTS = ScoringWeights()


def count_repeat_opponents(
    team1_players: Sequence[Player], team2_players: Sequence[Player], state: SchedulerState
) -> int:
    """Number of cross-team player pairs that have already faced each other."""
    return sum(
        1
        for p1 in team1_players
        for p2 in team2_players
        if state.has_played_against(p1.id, p2.id)
    )


def score_matchup(
    team1_players: Sequence[Player],
    team2_players: Sequence[Player],
    state: SchedulerState,
    game_type_id: str,
    rng: Optional[random.Random] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Score a candidate game between two partnerships.

    Args:
        team1_players: Partnership fielded by the first team
        team2_players: Partnership fielded by the second team
        state: History of the rounds scheduled so far
        game_type_id: Game type of the station being filled
        rng: Source of the tie-breaking jitter; no jitter when None
        weights: Scorer weights

    Returns:
        The matchup score; higher is better
    """
    players = list(team1_players) + list(team2_players)
    if not players:
        return float("-inf")

    score = 0.0

    average_games = sum(state.games_played(p.id) for p in players) / len(players)
    score -= weights.game_count * average_games

    score -= weights.repeat_opponent * count_repeat_opponents(
        team1_players, team2_players, state
    )

    switching = 0
    for player in players:
        previous = state.previous_game_type(player.id)
        if previous is not None and previous != game_type_id:
            switching += 1
    score += weights.variety * switching

    if rng is not None:
        score += rng.random() * weights.jitter

    return score
