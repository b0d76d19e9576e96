"""Checks that a tournament setup admits a schedule.

Errors are fatal and block schedule generation. Warnings are advisory and are
shown to the organiser while generation proceeds. Both are returned as data;
nothing here raises for a bad setup.
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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from stationpairing.models import Tournament


@dataclass
class SetupValidation:
    """Outcome of validating a tournament setup.

    Attributes
    ----------
    valid : bool
        True when there are no errors.
    errors : list of str
        Fatal problems, in the order they were found.
    warnings : list of str
        Non-fatal advice.
    summary : dict
        Counts the checks were based on: ``teams``, ``playersPerTeam``,
        ``totalPlayers``, ``totalStations`` and ``gameTypes``.
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    summary: Dict[str, int] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "summary": dict(self.summary),
        }


def _summary(
    teams: int, players_per_team: int, total_stations: int, game_types: int
) -> Dict[str, int]:
    return {
        "teams": teams,
        "playersPerTeam": players_per_team,
        "totalPlayers": teams * players_per_team,
        "totalStations": total_stations,
        "gameTypes": game_types,
    }


def validate_tournament_setup(tournament: Tournament) -> SetupValidation:
    """Validate that a tournament can be scheduled.

    Args:
        tournament: Tournament snapshot; it is not modified

    Returns:
        SetupValidation with errors, warnings and a summary
    """
    errors: List[str] = []
    warnings: List[str] = []
    teams = tournament.teams
    game_types = tournament.settings.game_types

    if len(teams) < 2:
        errors.append("At least 2 teams are required")
        players_per_team = len(teams[0].active_players) if teams else 0
        return SetupValidation(
            valid=False,
            errors=errors,
            warnings=warnings,
            summary=_summary(
                len(teams),
                players_per_team,
                tournament.settings.total_stations,
                len(game_types),
            ),
        )

    team_sizes = [len(team.active_players) for team in teams]
    if len(set(team_sizes)) > 1:
        errors.append(
            "All teams must have the same number of active players. "
            f"Current sizes: {', '.join(str(size) for size in team_sizes)}"
        )

    # The first team's roster stands in for all of them
    players_per_team = team_sizes[0]

    if not game_types:
        errors.append("At least one game type is required")

    total_stations = 0
    max_players_needed = 0
    for game_type in game_types:
        station_count = len(game_type.stations)
        if station_count == 0:
            errors.append(f"{game_type.name} has no stations configured")
            continue

        total_stations += station_count

        if game_type.players_per_team > players_per_team:
            errors.append(
                f"{game_type.name} requires {game_type.players_per_team} players per team, "
                f"but teams only have {players_per_team} players"
            )

        max_players_needed = max(
            max_players_needed, station_count * game_type.players_per_team * 2
        )

    if tournament.settings.rounds < 1:
        errors.append("Number of rounds must be at least 1")

    total_players = len(teams) * players_per_team
    min_players_needed = total_stations * 2
    if total_players < min_players_needed:
        errors.append(
            f"Not enough players. Need at least {min_players_needed} players total "
            f"for {total_stations} stations"
        )

    if total_players < max_players_needed:
        warnings.append(
            "Some game types may not be fully utilized. "
            "Consider reducing stations or changing team sizes."
        )

    for game_type in game_types:
        size = game_type.players_per_team
        if size <= 1:
            continue
        if not game_type.partner_mode:
            warnings.append(
                f"{game_type.name} is {size}v{size} but partner mode not set. "
                "Defaulting to 'rotating'."
            )
        leftover = players_per_team % size
        if leftover and players_per_team >= size:
            warnings.append(
                f"{game_type.name}: Each team has {players_per_team} players, but game "
                f"requires groups of {size}. {leftover} player(s) per team will rotate "
                "sitting out."
            )

    return SetupValidation(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        summary=_summary(len(teams), players_per_team, total_stations, len(game_types)),
    )
