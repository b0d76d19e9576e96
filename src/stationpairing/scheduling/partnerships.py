"""Partnership generation for multi-player game types.

A partnership is the group of teammates fielded together as one side of a
game. The functions here are pure: they read a roster and return groupings,
and never look at or change scheduler state.
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

import hashlib
from typing import Collection, List, Optional, Sequence

from stationpairing.constants import PARTNER_MODE_FIXED
from stationpairing.models import GameType, Player, Team
from stationpairing.type_hints import Partnerships


def _rotation_key(round_number: int, player_id: str) -> int:
    """Stable per-round ordering key for a player.

    Derived from a digest of ``"<round>-<player id>"`` so that it does not
    depend on ``PYTHONHASHSEED`` and changes from round to round.
    """
    digest = hashlib.blake2b(
        f"{round_number}-{player_id}".encode("utf-8"), digest_size=8
    ).digest()
    return int.from_bytes(digest, "big")


def _chunk(players: Sequence[Player], size: int) -> Partnerships:
    """Split players into consecutive groups, dropping an incomplete tail."""
    return [
        list(players[i : i + size])
        for i in range(0, len(players) - size + 1, size)
    ]


def rotating_order(players: Sequence[Player], size: int, round_number: int) -> List[Player]:
    """Order players for rotating partnerships in a given round.

    The per-round key shuffles the roster. When the team size is not a
    multiple of ``size``, the shuffled order is then rotated by
    ``(round - 1) * remainder`` so the leftover tail moves on each round.
    """
    count = len(players)
    if count == 0:
        return []
    ordered = sorted(players, key=lambda p: _rotation_key(round_number, p.id))
    remainder = count % size
    offset = ((round_number - 1) * remainder) % count if remainder else 0
    return ordered[offset:] + ordered[:offset]


def generate_partnerships(
    team: Team, game_type: GameType, round_number: int
) -> Partnerships:
    """Group a team's active players into partnerships for one round.

    Args:
        team: Team whose active roster is grouped
        game_type: Provides the group size and partner mode
        round_number: Round being scheduled (1-indexed)

    Returns:
        Disjoint groups of exactly ``game_type.players_per_team`` players.
        Players that do not fill a whole group are left out.

    Fixed mode chunks the roster in order, so the same groups come back every
    round. Rotating mode (also used when no mode is set) reorders the roster
    with a deterministic per-round key before chunking.
    """
    size = game_type.players_per_team
    active = team.active_players
    if size < 1 or len(active) < size:
        return []

    if game_type.effective_partner_mode == PARTNER_MODE_FIXED:
        ordered = active
    else:
        ordered = rotating_order(active, size, round_number)

    return _chunk(ordered, size)


def available_partnerships(
    team: Team,
    game_type: GameType,
    round_number: int,
    unavailable: Optional[Collection[str]] = None,
) -> Partnerships:
    """Partnerships whose players are all still free this round."""
    groups = generate_partnerships(team, game_type, round_number)
    if not unavailable:
        return groups
    return [g for g in groups if not any(p.id in unavailable for p in g)]
